"""
Typed errors for the account ledger.

Every error carries a stable machine-readable ``code`` (sent to
clients as ``Tipo``), a human ``message`` (sent as ``Mensagem``)
and the HTTP status the API layer should answer with. Callers
catch by type, never by message text.

    LedgerError
    +-- AccountNotFound       INVALID_ACCOUNT      400
    +-- AccountInactive       INACTIVE_ACCOUNT     400
    +-- InvalidAmount         INVALID_VALUE        400
    +-- InvalidMovementType   INVALID_TYPE         400
    +-- PersistenceFailure    PERSISTENCE_FAILURE  500
"""


class LedgerError(Exception):
    """Base class for every error the ledger reports to callers."""

    code: str = "LEDGER_ERROR"
    default_message: str = "Erro ao processar a requisição"
    http_status: int = 400

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"Tipo": self.code, "Mensagem": self.message}


class AccountNotFound(LedgerError):
    code = "INVALID_ACCOUNT"
    default_message = "Conta corrente não cadastrada"

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__()


class AccountInactive(LedgerError):
    code = "INACTIVE_ACCOUNT"
    default_message = "Conta corrente inativa"

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__()


class InvalidAmount(LedgerError):
    code = "INVALID_VALUE"
    default_message = "O valor deve ser positivo"


class InvalidMovementType(LedgerError):
    code = "INVALID_TYPE"
    default_message = "Tipo de movimento inválido"


class PersistenceFailure(LedgerError):
    """
    A store read or write failed, including a uniqueness
    violation on the idempotency key from a write race.

    Fatal for the current request. The client may retry with the
    same request key; once the race resolves the retry is answered
    as a replay.
    """

    code = "PERSISTENCE_FAILURE"
    default_message = "Falha ao acessar o armazenamento"
    http_status = 500

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__()
