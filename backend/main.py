"""
FastAPI application entry point.

Run with ``python main.py`` from anywhere, or ``uvicorn main:app`` from this
directory. The application packages live in ``src/``; they are importable
either through ``pip install -e .`` or through the path entry below.
"""

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.append(str(SRC_DIR))

from infrastructure.config import get_settings  # noqa: E402
from presentation.app import create_app  # noqa: E402


app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    settings = get_settings()
    uvicorn.run(
        "main:app",
        app_dir=str(Path(__file__).resolve().parent),
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
