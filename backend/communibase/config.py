import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from the package directory or parent directory
env_path = Path(__file__).parent / '.env'
if not env_path.exists():
    env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

class Config:
    # Communibase stores UTC; entities report dates in this zone
    TIMEZONE = os.getenv('COMMUNIBASE_TIMEZONE', 'Europe/Amsterdam')

    # Namespace the event record is stored under in a DataBag
    EVENT_ENTITY_TYPE = os.getenv('COMMUNIBASE_EVENT_ENTITY_TYPE', 'event')

    LOG_LEVEL = os.getenv('COMMUNIBASE_LOG_LEVEL', 'WARNING')
