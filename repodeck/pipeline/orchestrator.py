"""PipelineOrchestrator: URL -> SlidePresentation, with progress and cancellation.

State machine::

    repository -> files -> story -> slides -> complete
         \\          \\        \\        \\
          +----------+--------+--------+--> error

Only the repository stage suspends (cache lookup and metadata fetch). The
remaining stages are pure and run to completion once started.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta

from repodeck.cache.base import DEFAULT_TTL, MetadataCache
from repodeck.cancellation import CancellationToken
from repodeck.errors import AcquisitionError, GenerationCancelled, InvalidInputError
from repodeck.insights import compute_insights
from repodeck.narrative import ProjectPurpose, generate_story
from repodeck.output.store import PresentationStore
from repodeck.pipeline.models import GenerationRun, Progress, Stage
from repodeck.slides import SlidePresentation, assemble
from repodeck.vcs.base import MetadataSource
from repodeck.vcs.fallback import synthesize_metadata
from repodeck.vcs.models import RepositoryMetadata
from repodeck.vcs.urls import RepoRef, parse_repo_url

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[Progress], "Awaitable[None] | None"]


class PipelineOrchestrator:
    """Runs the generation pipeline with injected collaborators.

    The orchestrator holds no per-run state, so one instance can serve
    concurrent ``generate`` calls; they share only the metadata cache.
    """

    def __init__(
        self,
        source: MetadataSource,
        cache: MetadataCache | None = None,
        store: PresentationStore | None = None,
        cache_ttl: timedelta = DEFAULT_TTL,
    ) -> None:
        self.source = source
        self.cache = cache
        self.store = store
        self.cache_ttl = cache_ttl

    async def generate(
        self,
        url: str,
        mode: str = "ted",
        duration: int = 3,
        language: str = "ja",
        *,
        purpose_hints: ProjectPurpose | None = None,
        on_progress: ProgressCallback | None = None,
        cancel: CancellationToken | None = None,
        use_cache: bool = True,
    ) -> GenerationRun:
        """Generate a presentation for ``url``.

        Never raises for pipeline failures: the returned run ends in
        ``Stage.complete`` or ``Stage.error`` with ``error`` set.
        """
        run = GenerationRun(url=url)
        cancel = cancel or CancellationToken()

        async def emit(stage: Stage, progress: int, message: str, error: str | None = None) -> None:
            event = Progress(stage=stage, progress=progress, message=message, error=error)
            run.stage = stage
            run.progress = progress
            run.history.append(event)
            logger.debug("[%s] %s %d%% %s", url, stage.value, progress, message)
            if on_progress is not None:
                result = on_progress(event)
                if inspect.isawaitable(result):
                    await result

        try:
            await emit(Stage.repository, 0, "Fetching repository metadata")
            ref = parse_repo_url(url)
            meta = await self._acquire(ref, run, cancel, use_cache)
            await emit(
                Stage.repository,
                20,
                "Using metadata synthesized from the URL"
                if run.degraded
                else f"Loaded {meta.full_name}",
            )

            cancel.raise_if_cancelled()
            await emit(Stage.files, 25, "Analyzing project structure")
            run.insights = compute_insights(meta)

            cancel.raise_if_cancelled()
            await emit(Stage.story, 45, "Generating story")
            run.story = generate_story(meta, run.insights, language, purpose_hints)

            cancel.raise_if_cancelled()
            await emit(Stage.slides, 75, "Assembling slides")
            run.presentation = assemble(meta, run.story, mode, duration, language)

            if self.store is not None:
                cancel.raise_if_cancelled()
                await emit(Stage.slides, 90, "Saving presentation")
                run.saved_to = self._save(self.store, run.presentation)

            await emit(Stage.complete, 100, "Presentation ready")
        except (InvalidInputError, GenerationCancelled) as e:
            logger.info("generation stopped for %s: %s", url, e)
            await self._fail(run, e, emit)
        except Exception as e:
            logger.exception("generation failed for %s", url)
            await self._fail(run, e, emit)
        finally:
            run.finished_at = datetime.now(UTC)
        return run

    async def _acquire(
        self,
        ref: RepoRef,
        run: GenerationRun,
        cancel: CancellationToken,
        use_cache: bool,
    ) -> RepositoryMetadata:
        key = ref.url
        cache = self.cache if use_cache else None

        if cache is not None:
            cancel.raise_if_cancelled()
            cached = cache.get(key)
            if cached is not None:
                logger.info("cache hit for %s", key)
                run.from_cache = True
                run.metadata = cached
                return cached

        cancel.raise_if_cancelled()
        try:
            meta = await self.source.fetch(key, cancel)
        except (AcquisitionError, OSError) as e:
            logger.warning("metadata fetch failed for %s, using degraded metadata: %s", key, e)
            meta = synthesize_metadata(ref)
            run.degraded = True
        else:
            if cache is not None and not meta.degraded:
                cache.put(key, meta, self.cache_ttl)

        run.metadata = meta
        return meta

    @staticmethod
    def _save(store: PresentationStore, presentation: SlidePresentation) -> str | None:
        """Best-effort save; a failing store never fails the run."""
        try:
            return str(store.save(presentation))
        except Exception:
            logger.warning("Failed to save presentation %s", presentation.id, exc_info=True)
            return None

    @staticmethod
    async def _fail(
        run: GenerationRun,
        exc: Exception,
        emit: Callable[..., Awaitable[None]],
    ) -> None:
        run.failed_stage = run.stage
        run.error = str(exc) or type(exc).__name__
        run.exception = exc
        try:
            await emit(Stage.error, run.progress, run.error, error=type(exc).__name__)
        except Exception:
            logger.warning("progress callback failed while reporting an error", exc_info=True)
