#!/usr/bin/env python3
"""Direct launcher for the BudgetBuddy dashboard.

Runs Streamlit on ``budget_buddy/app.py`` with the project root on the
import path.  Extra arguments are passed through to ``streamlit run``.
"""

import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
app_path = project_root / "budget_buddy" / "app.py"

if __name__ == "__main__":
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(project_root), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-m", "streamlit", "run", str(app_path), *sys.argv[1:]],
        env=env,
    )
    sys.exit(result.returncode)
