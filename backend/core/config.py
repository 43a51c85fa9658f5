from dotenv import load_dotenv
import os

load_dotenv()


def _csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

ALLOWED_ORIGINS = _csv(
    os.getenv(
        "ALLOWED_ORIGINS",
        "https://lively-dune-0e6a62f03.6.azurestaticapps.net,http://localhost:3000",
    )
)

# age is always required; deployments may require more fields on top of it.
REQUIRED_FIELDS = ["age"] + [
    f for f in _csv(os.getenv("REQUIRED_FIELDS", "age")) if f != "age"
]

MALE_GENDER_WEIGHT = float(os.getenv("MALE_GENDER_WEIGHT", "1"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
