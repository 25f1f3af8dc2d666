"""
pytest configuration for content workflow tests.

Adds the repository root to sys.path so that
'from content_workflow.engine.xxx import ...' works without an install.
"""

import sys
from pathlib import Path

# Repository root holds the content_workflow package
repo_root = Path(__file__).parent.parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))
