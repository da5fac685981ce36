"""Collects generated elements and writes them out as one Go source file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional

from jinja2 import Environment, FileSystemLoader

from .elements import Element
from .logging import get_logger

DEFAULT_RUNTIME_IMPORT = "github.com/gopherjs/gopherjs/js"
HEADER_TEMPLATE = "header.go.j2"


class Binding:
    """An ordered, append-only collection of elements for one package."""

    def __init__(
        self,
        name: str,
        *,
        runtime_import: str = DEFAULT_RUNTIME_IMPORT,
        templates_dir: Optional[Path] = None,
    ) -> None:
        self.name = name
        self.runtime_import = runtime_import
        self.templates_dir = templates_dir
        self._elements: List[Element] = []
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("binding")

    @property
    def elements(self) -> List[Element]:
        return list(self._elements)

    def add_element(self, element: Element) -> None:
        self._elements.append(element)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def header(self) -> str:
        template = self._env.get_template(HEADER_TEMPLATE)
        text = template.render(package=self.name, runtime_import=self.runtime_import)
        return text if text.endswith("\n") else text + "\n"

    def render(self) -> str:
        """Render the full file; every element is followed by a blank line."""
        parts = [self.header()]
        for element in self._elements:
            for line in element.text():
                parts.append(line + "\n")
            parts.append("\n")
        return "".join(parts)

    def export(self, path: Path) -> Path:
        """Replace ``path`` with the rendered binding.

        Rendering happens before the destination is touched. The existing
        file is then deleted and recreated, which is not atomic.
        """
        text = self.render()
        path = Path(path)
        path.unlink(missing_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            handle.write(text)
        self.logger.info("Wrote %d elements to %s", len(self._elements), path)
        return path

    @staticmethod
    def _create_env(templates_dir: Optional[Path]) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["Binding", "DEFAULT_RUNTIME_IMPORT", "HEADER_TEMPLATE"]
