"""Top‑level package for BudgetBuddy.

This file makes the directory a Python package and exposes
convenient names.  The primary modules are:

* ``store`` – the transaction store kept in sync with the backend
* ``calculations`` – totals and the per-category expense breakdown
* ``visualization`` – the Plotly donut chart of spending

The Streamlit page lives in ``budget_buddy.app`` and is not imported
here so the data modules stay usable without starting a page.

To run the dashboard from the command line you can execute:

```bash
streamlit run budget_buddy/app.py
```

or ``python run_dashboard.py`` from the project root.
"""

from . import calculations  # noqa: F401  # re-exported for convenience
from . import store  # noqa: F401  # re-exported for convenience
from . import visualization  # noqa: F401  # re-exported for convenience

__all__ = ["calculations", "store", "visualization"]
