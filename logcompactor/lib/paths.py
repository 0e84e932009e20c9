import pathlib
import shutil

ETC_DIR = pathlib.Path("/etc/logcompactor")
CONFIG_PATH = ETC_DIR / "config.toml"

PACKAGE_DIR = pathlib.Path(__file__).parent.parent.absolute()
PACKAGE_DATA_PATH = PACKAGE_DIR / "data"

CANONICAL_LOG_NAME = "log"
GZIP_SUFFIX = ".gz"


def side_file_path(log_path: pathlib.Path) -> pathlib.Path:
    return log_path.with_name(log_path.name + GZIP_SUFFIX)


def initialize_config_file(config_path: pathlib.Path = CONFIG_PATH) -> bool:
    if config_path.exists():
        return False
    config_path.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy(PACKAGE_DATA_PATH / "config.toml", config_path)
    return True
