"""minichat launcher.

Serves the chat proxy and the three chat pages, either from one process or
as two. Settings come from the environment, with a .env file read first.
"""

import logging
import os
import sys
import time

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Serve the proxy and the chat pages from one uvicorn process.

    The pages call the proxy on the same PORT unless API_BASE_URL says
    otherwise.
    """
    import uvicorn
    from nicegui import ui

    from minichat.api.app import create_app
    from minichat.proxy.config import get_proxy_config
    from minichat.ui.chat_page import register_pages
    from minichat.ui.config import get_client_config

    port = int(os.getenv("PORT", "8000"))
    app = create_app(get_proxy_config())
    register_pages(get_client_config(port))

    ui.run_with(app, title="minichat")

    logger.info(f"Proxy on http://localhost:{port}/api/chat (docs at /docs)")
    logger.info(f"Chat pages at http://localhost:{port}/, /reveal, /light")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run the proxy and the chat pages as two processes.

    The proxy listens on PORT (default 8000) and the pages on UI_PORT
    (default 8080). The page process is pointed at the proxy through
    API_BASE_URL unless one is already set.
    """
    import subprocess

    host = os.getenv("HOST", "0.0.0.0")
    api_port = os.getenv("PORT", "8000")
    ui_port = os.getenv("UI_PORT", "8080")

    ui_env = os.environ.copy()
    ui_env.setdefault("API_BASE_URL", f"http://localhost:{api_port}")
    ui_env["UI_PORT"] = ui_port

    logger.info(f"Proxy on http://localhost:{api_port}/api/chat")
    logger.info(f"Chat pages on http://localhost:{ui_port} (proxy: {ui_env['API_BASE_URL']})")

    procs = [
        subprocess.Popen(
            [
                sys.executable,
                "-m",
                "uvicorn",
                "minichat.api.app:app",
                "--host",
                host,
                "--port",
                api_port,
            ]
        ),
        subprocess.Popen([sys.executable, "-m", "minichat.ui.chat_page"], env=ui_env),
    ]

    try:
        # Whichever process exits first takes the other one down with it.
        while all(proc.poll() is None for proc in procs):
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down minichat...")
    finally:
        for proc in procs:
            proc.terminate()
        for proc in procs:
            proc.wait()


def main() -> None:
    """Start minichat in the mode named by RUN_MODE (integrated or separate)."""
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting minichat in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
