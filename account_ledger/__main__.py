"""
Run the ledger API.

    python -m account_ledger
"""

import uvicorn

from account_ledger.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "account_ledger.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
    )
