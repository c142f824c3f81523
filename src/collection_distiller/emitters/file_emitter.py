"""File Emitter for writing collection documents into the site source.

Each document is rendered as YAML front matter, a "---" delimiter line, and
the raw body wrapped in a Liquid raw block so the site build does not
interpret template syntax inside CMS content.
"""

import logging
from pathlib import Path

import yaml
from jinja2 import Environment, FileSystemLoader

from collection_distiller.exceptions import EmitError
from schemas.document import Document

logger = logging.getLogger(__name__)

# Templates ship inside the package: file_emitter.py → emitters/ → collection_distiller/
PACKAGE_ROOT = Path(__file__).parent.parent
TEMPLATES_DIR = PACKAGE_ROOT / "resources" / "templates"


class FrontMatterDumper(yaml.SafeDumper):
    """SafeDumper that never emits YAML anchors and aliases."""

    def ignore_aliases(self, data):
        return True


def dump_front_matter(front_matter: dict) -> str:
    """Serialize front matter as a YAML document starting with '---'."""
    return yaml.dump(
        front_matter,
        Dumper=FrontMatterDumper,
        explicit_start=True,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )


class FileEmitter:
    """Render documents and write them under the site source.

    Attributes:
        source: Site source root
        template_name: Name of the Jinja2 document template
        templates_dir: Directory containing the template
    """

    def __init__(
        self,
        source: Path,
        template_name: str = "document.md.j2",
        templates_dir: Path | None = None,
    ):
        """Initialize the file emitter.

        Args:
            source: Site source root
            template_name: Name of the Jinja2 document template
            templates_dir: Directory containing templates (default: resources/templates)
        """
        self.source = source
        self.template_name = template_name
        self.templates_dir = templates_dir or TEMPLATES_DIR

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
        )

    def render(self, document: Document) -> str:
        """Render a document as front matter, delimiter and raw body."""
        template = self._env.get_template(self.template_name)
        return template.render(
            front_matter=dump_front_matter(document.front_matter),
            body=document.body,
        )

    def write(self, document: Document) -> Path:
        """Write a document, replacing any existing file of the same name.

        Args:
            document: Document to write

        Returns:
            Path of the written file

        Raises:
            EmitError: If the directory or file cannot be written
        """
        directory = self.source / document.collection
        path = directory / document.filename
        content = self.render(document)

        try:
            directory.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise EmitError(f"Failed to write {path}: {e}", path=path) from e

        logger.debug(f"Wrote {document.relative_path}")
        return path
