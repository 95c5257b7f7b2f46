"""Pytest configuration shared by all test suites"""

import os
import sys
import tempfile
from pathlib import Path

# Add project root to path for ir_lab imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ir_lab.main configures logging on import; keep session logs out of the repo
os.environ.setdefault(
    "IR_LAB_LOG_FILE",
    str(Path(tempfile.gettempdir()) / "ir-lab-tests" / "ir-lab.log"),
)
