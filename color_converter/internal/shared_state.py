import os
from color_converter.internal import config


CONFIG_PATH_ENV = "COLOR_CONVERTER_CONFIG"


class SharedState:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(SharedState, cls).__new__(cls)
            cls._instance.__init__(True)
        return cls._instance

    def __init__(self, should_actually_do_stuff: bool = False):
        if not should_actually_do_stuff:
            return
        print("[SharedState] Init")
        self.config = config.Config(os.environ.get(CONFIG_PATH_ENV, "config.ini"))
        print("[SharedState] Ready")

    @classmethod
    def reset(cls):
        cls._instance = None
