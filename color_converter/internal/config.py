import configparser
import os
from colorama import Fore, Back, Style, init
init(autoreset=True)


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001
DEFAULT_STATIC_DIR = "public"
DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:3001",
]


class Config:
    def __init__(self, config_filepath: str = "config.ini"):
        print(f"[Config] Starting to read '{config_filepath}'")
        self._host: str = DEFAULT_HOST
        self._port: int = DEFAULT_PORT
        self._static_dir: str = DEFAULT_STATIC_DIR
        self._cors_origins: list[str] = list(DEFAULT_CORS_ORIGINS)

        config = configparser.ConfigParser()
        try:
            read_files = config.read(config_filepath)
        except configparser.Error as e:
            print(f"[Config] {Back.RED + Style.BRIGHT}|!!| ERROR! Couldn't parse '{config_filepath}': {e} |!!|")
            read_files = []

        if not read_files:
            print(f"[Config] {Fore.YELLOW}|::| Warning! '{config_filepath}' not found or unreadable. Using defaults")
        elif not config.has_section("SERVER"):
            print(f"[Config] {Fore.YELLOW}|::| Warning! No 'SERVER' section found in '{config_filepath}'. Using defaults")
        else:
            self._load_server_section(config["SERVER"], config_filepath)

        print(f"[Config] Host: {self._host}, port: {self._port}")
        print(f"[Config] Static dir: '{self._static_dir}'")
        print(f"[Config] CORS origins: {self._cors_origins}")
        print("[Config] Ready")

    def _load_server_section(self, section: configparser.SectionProxy, config_filepath: str):
        self._host = section.get("host", DEFAULT_HOST).strip() or DEFAULT_HOST

        raw_port = section.get("port", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
            if not 0 < port < 65536:
                raise ValueError(f"port {port} out of range")
            self._port = port
        except ValueError:
            print(f"[Config] {Fore.YELLOW}|::| Warning! Invalid port '{raw_port}' in {config_filepath}. Falling back to {DEFAULT_PORT}")

        self._static_dir = section.get("static_dir", DEFAULT_STATIC_DIR).strip()

        raw_origins = section.get("cors_origins")
        if raw_origins is not None:
            self._cors_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def static_dir(self) -> str:
        return self._static_dir

    @property
    def cors_origins(self) -> list[str]:
        return self._cors_origins

    @property
    def has_static_dir(self) -> bool:
        return bool(self._static_dir) and os.path.isdir(self._static_dir)
