import dotenv
import os

DEFAULT_API_URL = "https://discord.com/api"
DEFAULT_API_VERSION = "10"


class Config:
    _api_token: str | None
    _api_version: str
    _api_url: str
    _application_id: str | None
    _log_file: str | None

    def __init__(self, env_file: str = ".env", *,
                 api_token: str | None = None,
                 api_url: str | None = None,
                 api_version: str | None = None,
                 application_id: str | None = None,
                 log_file: str | None = None):
        dotenv.load_dotenv(env_file)
        self._api_token = api_token or os.getenv("API_TOKEN")
        self._api_url = (api_url or os.getenv("API_URL", default=DEFAULT_API_URL)).rstrip("/")
        self._api_version = str(api_version or os.getenv("API_VERSION", default=DEFAULT_API_VERSION))
        self._application_id = application_id or os.getenv("APPLICATION_ID")
        self._log_file = log_file or os.getenv("LOG_FILE")

    @property
    def api_token(self):
        return self._api_token

    @property
    def api_version(self):
        return self._api_version

    @property
    def api_url(self):
        return self._api_url

    @property
    def base_url(self):
        return f"{self._api_url}/v{self._api_version}"

    @property
    def application_id(self):
        return self._application_id

    @property
    def log_file(self):
        return self._log_file
