"""
Services built on top of the entity stores.

- NotebookCoordinator: cross-entity writes and counter maintenance
- SelectionManager: multi-select state
- project / project_view: derived note views
- CommandDispatcher: named command boundary
"""

from mindnotes.services.commands import CommandDispatcher
from mindnotes.services.coordinator import NotebookCoordinator
from mindnotes.services.seed import build_notebook, seed_demo_data
from mindnotes.services.selection_manager import SelectionManager
from mindnotes.services.view_projector import group_by_day, project, project_view

__all__ = [
    "CommandDispatcher",
    "NotebookCoordinator",
    "SelectionManager",
    "build_notebook",
    "seed_demo_data",
    "group_by_day",
    "project",
    "project_view",
]
