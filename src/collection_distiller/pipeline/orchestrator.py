"""Pipeline orchestrator for generating site collections from a CMS export.

Runs the stages of a generation in order:

    posts → blog home → press releases

Each stage loads its own feeds and is skipped when they are absent. The post
documents produced by the first stage are handed to the blog home stage,
which features one of them.
"""

import logging

from collection_distiller.emitters import FileEmitter
from collection_distiller.exceptions import EmitError, EntryError
from collection_distiller.sources import ContentStore
from collection_distiller.transformers import (
    BlogHomeTransformer,
    EntryTransformer,
    PostTransformer,
    PressReleaseTransformer,
    ReferenceResolver,
)
from schemas.config import GeneratorConfig
from schemas.document import Document
from schemas.entries import Entry
from schemas.report import GenerationReport

logger = logging.getLogger(__name__)

COLLECTION_POST_LAYOUT = "blog/blog-post"
COLLECTION_EXCERPT_WORDS = 35


class Orchestrator:
    """End-to-end generator for one site source.

    Attributes:
        config: Generator settings
        store: ContentStore reading the CMS export
        emitter: FileEmitter writing into the site source
    """

    def __init__(
        self,
        config: GeneratorConfig,
        store: ContentStore | None = None,
        emitter: FileEmitter | None = None,
    ):
        self.config = config
        self.store = store or ContentStore(config.source, config.data_dir)
        self.emitter = emitter or FileEmitter(config.source)

    def run(self) -> GenerationReport:
        """Generate posts, the blog home and press releases.

        Returns:
            Report of the files written and entries skipped

        Raises:
            EmitError: If a file cannot be written
            EntryError: If an entry is invalid and entry_errors is "abort"
        """
        report = GenerationReport()
        try:
            posts = self.generate_posts(report)
            self.generate_blog_home(posts, report)
            self.generate_press_releases(report)
        except (EmitError, EntryError):
            report.status = "failed"
            raise

        report.status = "complete"
        logger.info(
            f"Generation complete: {len(report.written)} written, "
            f"{len(report.skipped)} skipped"
        )
        return report

    def run_collection(self) -> GenerationReport:
        """Generate posts only, without reference resolution.

        Posts get the collection layout, no permalink, and excerpts of at
        most 35 words.
        """
        report = GenerationReport()
        transformer = PostTransformer(
            resolver=None,
            excerpt_strategy="words",
            excerpt_length=COLLECTION_EXCERPT_WORDS,
            layout=COLLECTION_POST_LAYOUT,
            set_permalink=False,
        )

        logger.info("Generating blog posts...")
        posts = self.store.load("posts")
        if posts is None:
            logger.info(f"File does not exist: {self.store.path_for('posts')}")
            report.status = "complete"
            return report

        try:
            self._emit_all(posts, transformer, report)
        except (EmitError, EntryError):
            report.status = "failed"
            raise

        report.status = "complete"
        return report

    def generate_posts(self, report: GenerationReport) -> list[Document]:
        """Generate _posts documents.

        Args:
            report: Run report to update

        Returns:
            Documents of the posts written in this run, in feed order
        """
        logger.info("Generating blog posts...")

        posts = self.store.load("posts")
        if posts is None:
            logger.info("No new blog posts found")
            return []

        categories = self.store.load("categories")
        authors = self.store.load("authors")
        assets = self.store.load("assets")
        for name, feed in (("categories", categories), ("authors", authors), ("assets", assets)):
            if feed is None:
                logger.debug(f"No {name} found, {name} references left unresolved")

        resolver = ReferenceResolver(
            categories=categories,
            authors=authors,
            assets=assets,
            policy=self.config.unresolved_references,
        )
        transformer = PostTransformer(
            resolver=resolver,
            excerpt_strategy=self.config.excerpt_strategy,
            excerpt_length=self.config.effective_excerpt_length,
        )

        documents = self._emit_all(posts, transformer, report)
        report.unresolved_references.extend(resolver.unresolved)
        logger.info(f"Generated {len(documents)} blog posts")
        return documents

    def generate_blog_home(
        self, posts: list[Document], report: GenerationReport
    ) -> Document | None:
        """Generate the blog listing page.

        Args:
            posts: Post documents generated earlier in this run
            report: Run report to update

        Returns:
            The blog home document, or None if there is no blog home entry
        """
        logger.info("Generating blog home...")

        entry = self.store.load_first("blog_home")
        if entry is None:
            logger.info("No blog home found")
            return None

        transformer = BlogHomeTransformer()
        try:
            document = transformer.transform(entry, posts)
        except EntryError as e:
            self._entry_failed(e, report, key="blog_home")
            return None

        self._write(document, report)
        return document

    def generate_press_releases(self, report: GenerationReport) -> list[Document]:
        """Generate _press_releases documents."""
        logger.info("Generating press releases...")

        press_releases = self.store.load("press_releases")
        if press_releases is None:
            logger.info("No new press releases found")
            return []

        documents = self._emit_all(press_releases, PressReleaseTransformer(), report)
        logger.info(f"Generated {len(documents)} press releases")
        return documents

    def _emit_all(
        self,
        entries: dict[str, Entry],
        transformer: EntryTransformer,
        report: GenerationReport,
    ) -> list[Document]:
        """Transform and write every entry of a feed."""
        documents: list[Document] = []
        for key, entry in entries.items():
            try:
                document = transformer.transform(entry)
            except EntryError as e:
                self._entry_failed(e, report, key)
                continue

            self._write(document, report)
            documents.append(document)
        return documents

    def _write(self, document: Document, report: GenerationReport) -> None:
        self.emitter.write(document)
        report.written.append(document.relative_path)

    def _entry_failed(
        self, error: EntryError, report: GenerationReport, key: str
    ) -> None:
        """Apply the entry error policy: abort the run, or skip and report.

        Entries without a uid are reported by their feed key.
        """
        if self.config.entry_errors == "abort":
            raise error

        uid = error.uid if error.uid is not None else key
        logger.error(f"Skipping entry {uid}: {error.message}")
        report.skipped.append(str(uid))
        report.validation_errors.append(f"Entry {uid}: {error.message}")
