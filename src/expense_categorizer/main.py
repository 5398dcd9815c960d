import uvicorn

from expense_categorizer.core import settings
from expense_categorizer.logger import get_logging_config


def run() -> None:
    uvicorn.run(
        "expense_categorizer.app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=get_logging_config(),
    )


if __name__ == "__main__":
    run()
