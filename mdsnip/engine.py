"""
Main processing pipeline: many documents through one importer.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .config import SnipConfig, load_config
from .files import iter_documents
from .importer import CodeImporter, ImportOptions, ImportResult
from .reader import ENCODING_ERRORS
from .registry import ReferencedFiles
from .report import DocumentReport, RunReport

logger = logging.getLogger(__name__)


class Engine:
    """
    Engine coordinating class.

    Owns the configuration, one CodeImporter and the referenced-files
    registry it fills while documents are processed.
    """

    def __init__(self, root: Path, options: Optional[ImportOptions] = None, config: Optional[SnipConfig] = None):
        """
        Args:
            root: Project root (mdsnip.yaml location, base for relative paths)
            options: Explicit import options; derived from the config when omitted
            config: Preloaded config; read from <root>/mdsnip.yaml when omitted
        """
        self.root = root.resolve()
        self.config = config if config is not None else load_config(self.root)
        self.options = options if options is not None else self.config.to_options(self.root)
        self.registry = ReferencedFiles()
        self.importer = CodeImporter(self.options, registry=self.registry)

    def _rel(self, path: Path) -> str:
        try:
            return path.resolve().relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    def collect_documents(self, paths: Sequence[Path] = ()) -> List[Path]:
        """
        Explicit files are taken as is, directories are scanned with the
        configured include/exclude patterns; no paths → the whole root.
        """
        targets = list(paths) or [self.root]
        out: List[Path] = []
        for p in targets:
            p = p if p.is_absolute() else (self.root / p)
            if p.is_dir():
                out.extend(iter_documents(
                    p,
                    self.config.include,
                    self.config.exclude,
                    respect_gitignore=self.config.respect_gitignore,
                ))
            else:
                out.append(p)
        return out

    def process(self, doc_path: Path, *, write: bool = False) -> ImportResult:
        result = self.importer.transform_file(doc_path)
        if result.changed:
            logger.info("%s: %d block(s) imported%s", self._rel(doc_path), result.blocks,
                        "" if write else " (not written)")
            if write:
                doc_path.write_text(result.text, encoding="utf-8", errors=ENCODING_ERRORS, newline="")
        return result

    def run(self, documents: Iterable[Path], *, write: bool = False) -> RunReport:
        reports: List[DocumentReport] = []
        for doc in documents:
            result = self.process(doc, write=write)
            reports.append(DocumentReport(
                path=self._rel(doc),
                blocks=result.blocks,
                changed=result.changed,
                missing=result.missing,
            ))
        return RunReport(documents=reports, referenced_files=self.registry.as_list())


__all__ = ["Engine"]
