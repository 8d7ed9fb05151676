# wsgi.py
import sys
from pathlib import Path

# make config.py importable when launched from another working directory
ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from visitorinfo import create_app  # noqa: E402

app = create_app()
