import importlib.util
import sys

from .errors import MissingConfiguration, MissingDependency

# import name -> pip name
REQUIRED_MODULES = {
    "fastapi": "fastapi",
    "selenium": "selenium",
    "uvicorn": "uvicorn",
    "dotenv": "python-dotenv",
    "requests": "requests",
}


def check_dependencies(modules=None):
    modules = REQUIRED_MODULES if modules is None else modules
    missing = [pip_name for name, pip_name in modules.items() if importlib.util.find_spec(name) is None]
    if missing:
        lines = "\n".join(f"  - {name}  (pip install {name})" for name in missing)
        raise MissingDependency(f"Faltan módulos requeridos:\n{lines}")


def main():
    # nothing third-party is imported before the dependency check
    try:
        check_dependencies()
        from .config import Settings
        settings = Settings.from_env().require()
    except (MissingDependency, MissingConfiguration) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    import uvicorn
    from .logger import get_logger
    from .server import ENDPOINTS, create_app
    from .utils import local_ip

    log = get_logger("main")
    log.info(f"Settings: {settings.describe()}")
    log.info("API running at:")
    log.info(f"   http://localhost:{settings.port}")
    log.info(f"   http://{local_ip()}:{settings.port}")
    log.info("Endpoints:")
    for line in ENDPOINTS:
        log.info(f"   {line}")

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
