"""Top‑level package for the household budget dashboard.

The package turns raw budget records into the figures a dashboard
displays.  The primary modules are:

* ``aggregation`` – category and priority-level totals for fixed expenses
* ``bindings`` – binding periods that expire within the tracking window
* ``income`` – active monthly net income resolution and owner helpers
* ``visibility`` – hidden-category toggling and the visible totals
* ``forecast`` – the flat twelve-month projection
* ``savings`` – savings goal progress statistics
* ``summary`` – payload normalisation and summary building
* ``dashboard`` – a controller that ties everything together

A JSON snapshot can be summarised from the command line with:

```bash
python scripts/summarize_budget.py --input snapshot.json
```
"""

from . import aggregation  # noqa: F401  # re-exported for convenience
from . import bindings  # noqa: F401  # re-exported for convenience
from . import income  # noqa: F401  # re-exported for convenience
from . import visibility  # noqa: F401  # re-exported for convenience
from . import forecast  # noqa: F401  # re-exported for convenience
from . import savings  # noqa: F401  # re-exported for convenience
from . import summary  # noqa: F401  # re-exported for convenience
from .dashboard import DashboardController  # noqa: F401

__all__ = [
    "aggregation",
    "bindings",
    "income",
    "visibility",
    "forecast",
    "savings",
    "summary",
    "DashboardController",
]
