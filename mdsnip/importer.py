"""
Code import transformer.

Walks the fenced code blocks of a Markdown document, and for every block
whose info string carries a `file=...` directive replaces the body with the
snippet extracted from the referenced file.

Pipeline per document:
  1) parse_code_blocks → ParsedDoc
  2) plan: validate language tags, parse directives, resolve and register paths
  3) read referenced files (sync, or concurrently under asyncio)
  4) extract_snippet for every read file
  5) render_code_blocks with the new bodies
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .directive import DirectiveArgs, parse_directive
from .errors import DirectiveSyntaxError, LanguageTagMissingError, SnippetFileNotFoundError
from .markdown.model import ParsedDoc
from .markdown.parser import parse_code_blocks
from .markdown.render import render_code_blocks
from .reader import FileReader, LocalFileReader
from .registry import ReferencedFiles
from .snippet import extract_snippet

logger = logging.getLogger(__name__)

MISSING_FILE_TEMPLATE = "Referenced file from {doc} ({file}) not found."
_FILE_TOKEN = re.compile(r"(?:^|\s)file=")


@dataclass(frozen=True)
class ImportOptions:
    # directory file= references are resolved against; None → directory of the document
    base_dir: Optional[Path] = None
    # substitute a notice instead of failing when a referenced file is absent
    ignore_missing_files: bool = False
    # read referenced files concurrently in transform_file()
    use_async: bool = False


@dataclass
class ImportResult:
    text: str
    changed: bool = False
    blocks: int = 0                                   # number of imported blocks
    missing: List[str] = field(default_factory=list)  # file= values that were not found


@dataclass(frozen=True)
class _ImportJob:
    index: int          # position in ParsedDoc.blocks
    args: DirectiveArgs
    abs_path: Path


class CodeImporter:
    """
    Replaces bodies of `file=`-annotated code blocks with file snippets.

    Usage:
        importer = CodeImporter(ImportOptions(ignore_missing_files=True))
        result = importer.transform_file(Path("docs/guide.md"))
        deps = importer.registry.as_list()
    """

    def __init__(
        self,
        options: Optional[ImportOptions] = None,
        *,
        reader: Optional[FileReader] = None,
        registry: Optional[ReferencedFiles] = None,
    ):
        self.options = options or ImportOptions()
        self.reader: FileReader = reader or LocalFileReader()
        self.registry = registry if registry is not None else ReferencedFiles()

    # ---------------------------- planning ---------------------------- #

    def _doc_label(self, doc_path: Optional[Path]) -> str:
        return str(doc_path) if doc_path is not None else "<stdin>"

    def _resolve_base(self, doc_path: Optional[Path]) -> Path:
        if self.options.base_dir is not None:
            return Path(self.options.base_dir)
        if doc_path is not None:
            return doc_path.parent
        return Path.cwd()

    def _plan(self, doc: ParsedDoc, doc_path: Optional[Path]) -> List[_ImportJob]:
        jobs: List[_ImportJob] = []
        base = self._resolve_base(doc_path)

        for idx, block in enumerate(doc.blocks):
            if block.has_lang() and block.lang.startswith("file="):
                raise LanguageTagMissingError(self._doc_label(doc_path))
            if not block.meta:
                continue
            try:
                args = parse_directive(block.meta)
            except DirectiveSyntaxError:
                # only an import directive is ours to reject
                if _FILE_TOKEN.search(block.meta):
                    raise
                logger.debug("Block at line %d has an unparsable info string, skipped", block.start_line + 1)
                continue
            if not args.file:
                logger.debug("Block at line %d has no file= directive, skipped", block.start_line + 1)
                continue

            abs_path = (base / args.file).resolve()
            self.registry.add(abs_path)
            jobs.append(_ImportJob(index=idx, args=args, abs_path=abs_path))

        return jobs

    # ---------------------------- per block ---------------------------- #

    def _missing(self, job: _ImportJob, doc_path: Optional[Path], err: FileNotFoundError) -> str:
        if not self.options.ignore_missing_files:
            raise SnippetFileNotFoundError(job.args.file or "") from err
        doc_name = doc_path.name if doc_path is not None else "<stdin>"
        logger.warning("Referenced file %s not found (from %s), substituting a notice", job.args.file, doc_name)
        return MISSING_FILE_TEMPLATE.format(doc=doc_name, file=job.args.file)

    def _snippet(self, job: _ImportJob, content: str) -> str:
        logger.debug(
            "Importing %s (start=%r, end=%r) into block #%d",
            job.args.file, job.args.start, job.args.end, job.index,
        )
        return extract_snippet(content, job.args.start, job.args.end, source=job.args.file or "")

    def _read_one(self, job: _ImportJob, doc_path: Optional[Path]) -> Tuple[int, str, bool]:
        try:
            content = self.reader.read_text(job.abs_path)
        except FileNotFoundError as e:
            return job.index, self._missing(job, doc_path, e), True
        return job.index, self._snippet(job, content), False

    async def _read_one_async(self, job: _ImportJob, doc_path: Optional[Path]) -> Tuple[int, str, bool]:
        try:
            content = await self.reader.read_text_async(job.abs_path)
        except FileNotFoundError as e:
            return job.index, self._missing(job, doc_path, e), True
        return job.index, self._snippet(job, content), False

    # ---------------------------- assembling ---------------------------- #

    def _finish(self, text: str, doc: ParsedDoc, jobs: List[_ImportJob],
                outcomes: List[Tuple[int, str, bool]]) -> ImportResult:
        if not jobs:
            # nothing to import: keep the source text byte for byte
            return ImportResult(text=text)

        bodies: Dict[int, str] = {}
        missing: List[str] = []
        by_index = {job.index: job for job in jobs}
        for idx, body, is_missing in outcomes:
            bodies[idx] = body
            if is_missing:
                missing.append(by_index[idx].args.file or "")

        new_text = render_code_blocks(doc, bodies)
        return ImportResult(
            text=new_text,
            changed=new_text != text,
            blocks=len(bodies),
            missing=missing,
        )

    def transform(self, text: str, doc_path: Optional[Path] = None) -> ImportResult:
        """Synchronous pass: files are read one by one in document order."""
        doc = parse_code_blocks(text)
        jobs = self._plan(doc, doc_path)
        outcomes = [self._read_one(job, doc_path) for job in jobs]
        return self._finish(text, doc, jobs, outcomes)

    async def transform_async(self, text: str, doc_path: Optional[Path] = None) -> ImportResult:
        """
        Concurrent pass: all referenced files are read in flight at once.

        Each read is independent. With ignore_missing_files a missing file only
        affects its own block; otherwise the first failure fails the document.
        """
        doc = parse_code_blocks(text)
        jobs = self._plan(doc, doc_path)
        outcomes = await asyncio.gather(*(self._read_one_async(job, doc_path) for job in jobs))
        return self._finish(text, doc, jobs, list(outcomes))

    def transform_file(self, doc_path: Path) -> ImportResult:
        text = self.reader.read_text(doc_path)
        if self.options.use_async:
            return asyncio.run(self.transform_async(text, doc_path))
        return self.transform(text, doc_path)


__all__ = ["ImportOptions", "ImportResult", "CodeImporter", "MISSING_FILE_TEMPLATE"]
