"""
MindNotes Entry Point

Run with: python main.py [config.yaml]

Builds a notebook from configuration (env vars > YAML > defaults) and logs
the projected note list.
"""

import sys

from mindnotes.config import Config
from mindnotes.services.seed import build_notebook
from mindnotes.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def main(argv: list[str]) -> int:
    config = Config.from_env_or_yaml(yaml_path=argv[1] if len(argv) > 1 else None)
    setup_logging(**config.logging.model_dump())

    notebook = build_notebook(config)
    for note in notebook.visible_notes():
        pin = "*" if note.is_pinned else " "
        logger.info(f"{pin} [{note.category}] {note.title or '(untitled)'}")
    for category in notebook.coordinator.categories.categories:
        logger.info(f"{category.name}: {category.note_count} notes")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
