import os
import dotenv


dotenv.load_dotenv()


# Defaults
DEBUG = False
VERBOSE = False
LOG_PATH = ""
LOG_ROTATION = "1 week"
LOG_RETENTION = "1 month"

# Transmission defaults
TRANSMISSION_URL = "http://localhost:9091/transmission/rpc"
TRANSMISSION_USERNAME = ""
TRANSMISSION_PASSWORD = ""
TRANSMISSION_TIMEOUT = 30.0

# Challenges answered per call before giving up
MAX_SESSION_RETRIES = 5


class Config:
    DEBUG = os.getenv("DEBUG", str(DEBUG)).lower() == "true"
    VERBOSE = os.getenv("VERBOSE", str(VERBOSE)).lower() == "true"

    LOG_PATH = os.getenv("LOG_PATH", LOG_PATH)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO")
    LOG_ROTATION = os.getenv("LOG_ROTATION", LOG_ROTATION)
    LOG_RETENTION = os.getenv("LOG_RETENTION", LOG_RETENTION)

    # Transmission Configuration
    TRANSMISSION_URL = os.getenv("TRANSMISSION_URL", TRANSMISSION_URL)
    TRANSMISSION_USERNAME = os.getenv("TRANSMISSION_USERNAME", TRANSMISSION_USERNAME)
    TRANSMISSION_PASSWORD = os.getenv("TRANSMISSION_PASSWORD", TRANSMISSION_PASSWORD)
    TRANSMISSION_TIMEOUT = float(os.getenv("TRANSMISSION_TIMEOUT", TRANSMISSION_TIMEOUT))

    MAX_SESSION_RETRIES = int(os.getenv("MAX_SESSION_RETRIES", MAX_SESSION_RETRIES))
