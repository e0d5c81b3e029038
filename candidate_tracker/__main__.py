"""Run the API with uvicorn: ``python -m candidate_tracker``."""

import uvicorn

from candidate_tracker.core.config import settings


def main() -> None:
    uvicorn.run("candidate_tracker.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
