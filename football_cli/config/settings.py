import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    API_URL = os.getenv('FOOTBALL_API_URL', 'https://api.football-data.org/v1/')
    BUGS_URL = os.getenv('FOOTBALL_BUGS_URL', 'https://github.com/ManrajGrover/football-cli/issues')
    REQUEST_TIMEOUT = float(os.getenv('FOOTBALL_REQUEST_TIMEOUT', '15'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')
    LOG_FILE = os.getenv('LOG_FILE')
    JSON_LOGS = os.getenv('JSON_LOGS', 'false').lower() == 'true'

    LEAGUE_IDS_PATH = os.getenv('LEAGUE_IDS_PATH')

    @classmethod
    def get_api_url(cls):
        # Endpoints are appended verbatim, so the base must end in a slash
        return cls.API_URL if cls.API_URL.endswith('/') else cls.API_URL + '/'
