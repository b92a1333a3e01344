"""Integration tests: repository URL through to a stored SlidePresentation."""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock

from repodeck.cache import FileMetadataCache, MemoryMetadataCache
from repodeck.cancellation import CancellationToken
from repodeck.errors import AcquisitionError, GenerationCancelled, InvalidInputError
from repodeck.narrative import ProjectPurpose
from repodeck.output import JsonPresentationStore
from repodeck.pipeline import PipelineOrchestrator, Progress, Stage
from repodeck.slides import SlidePurpose

URL = "https://github.com/acme/toeic-study-app"


def _trace(run):
    return [(e.stage, e.progress) for e in run.history]


# ── Happy path ──────────────────────────────────────────────────────


class TestGenerate:
    async def test_completes_with_presentation(self, mock_source):
        run = await PipelineOrchestrator(mock_source).generate(URL, "ted", 5, "ja")
        assert run.succeeded
        assert run.error is None
        assert len(run.presentation.slides) == 8
        assert run.presentation.total_seconds == 300
        assert run.insights.project_type == "learning"
        assert run.finished_at is not None
        mock_source.fetch.assert_awaited_once()

    async def test_progress_order_without_store(self, mock_source):
        run = await PipelineOrchestrator(mock_source).generate(URL)
        assert _trace(run) == [
            (Stage.repository, 0),
            (Stage.repository, 20),
            (Stage.files, 25),
            (Stage.story, 45),
            (Stage.slides, 75),
            (Stage.complete, 100),
        ]

    async def test_progress_is_monotonic_with_store(self, mock_source, storage_config):
        store = JsonPresentationStore(storage_config)
        run = await PipelineOrchestrator(mock_source, store=store).generate(URL)
        progress = [p for _, p in _trace(run)]
        assert progress == sorted(progress)
        assert (Stage.slides, 90) in _trace(run)
        assert run.saved_to is not None
        assert store.get(run.presentation.id) is not None

    async def test_sync_callback(self, mock_source):
        events: list[Progress] = []
        await PipelineOrchestrator(mock_source).generate(URL, on_progress=events.append)
        assert [e.stage for e in events][-1] == Stage.complete
        assert len(events) == 6

    async def test_async_callback(self, mock_source):
        seen: list[Stage] = []

        async def on_progress(event: Progress) -> None:
            await asyncio.sleep(0)
            seen.append(event.stage)

        await PipelineOrchestrator(mock_source).generate(URL, on_progress=on_progress)
        assert seen[0] == Stage.repository
        assert seen[-1] == Stage.complete

    async def test_purpose_hints_reach_story(self, mock_source):
        hints = ProjectPurpose(engaging_questions=["Ready for test day?"])
        run = await PipelineOrchestrator(mock_source).generate(
            URL, language="en", purpose_hints=hints
        )
        assert run.story.why.hook == "Ready for test day?"
        assert run.presentation.slide_for(SlidePurpose.why).content.startswith("Ready for test day?")

    async def test_concurrent_runs_are_independent(self, mock_source, sample_metadata):
        other = sample_metadata.model_copy(
            update={"owner": "beta", "name": "dash", "url": "https://github.com/beta/dash"}
        )

        async def fetch(url, cancel=None):
            await asyncio.sleep(0)
            return other if "beta" in url else sample_metadata

        mock_source.fetch = AsyncMock(side_effect=fetch)
        orchestrator = PipelineOrchestrator(mock_source, cache=MemoryMetadataCache())
        first, second = await asyncio.gather(
            orchestrator.generate(URL, "ted", 3),
            orchestrator.generate("https://github.com/beta/dash", "imrad", 5),
        )
        assert first.succeeded and second.succeeded
        assert first.presentation.title == "toeic-study-app"
        assert second.presentation.title == "dash"
        assert len(first.presentation.slides) == 6
        assert len(second.presentation.slides) == 8
        assert first.history is not second.history


# ── Cache ───────────────────────────────────────────────────────────


class TestCaching:
    async def test_cache_hit_skips_fetch(self, mock_source, sample_metadata):
        cache = MemoryMetadataCache()
        cache.put(URL, sample_metadata)
        run = await PipelineOrchestrator(mock_source, cache=cache).generate(URL)
        assert run.succeeded
        assert run.from_cache
        mock_source.fetch.assert_not_called()

    async def test_equivalent_urls_share_entry(self, mock_source):
        cache = MemoryMetadataCache()
        orchestrator = PipelineOrchestrator(mock_source, cache=cache)
        await orchestrator.generate(URL)
        run = await orchestrator.generate("github.com/acme/toeic-study-app.git")
        assert run.from_cache
        assert mock_source.fetch.await_count == 1

    async def test_use_cache_false_bypasses(self, mock_source, sample_metadata):
        cache = MemoryMetadataCache()
        cache.put(URL, sample_metadata)
        run = await PipelineOrchestrator(mock_source, cache=cache).generate(URL, use_cache=False)
        assert not run.from_cache
        mock_source.fetch.assert_awaited_once()

    async def test_undecodable_file_cache_is_a_miss(self, mock_source, tmp_path):
        (tmp_path / "manifest.json").write_bytes(b"\xff\xfe")
        cache = FileMetadataCache(tmp_path)
        run = await PipelineOrchestrator(mock_source, cache=cache).generate(URL)
        assert run.succeeded
        assert not run.from_cache
        mock_source.fetch.assert_awaited_once()


# ── Degraded and failing runs ───────────────────────────────────────


class TestFailures:
    async def test_invalid_url_fails_before_fetch(self, mock_source):
        events: list[Progress] = []
        run = await PipelineOrchestrator(mock_source).generate(
            "not-a-url", on_progress=events.append
        )
        assert run.stage == Stage.error
        assert not run.succeeded
        assert run.failed_stage == Stage.repository
        assert isinstance(run.exception, InvalidInputError)
        assert events[-1].error == "InvalidInputError"
        assert run.presentation is None
        mock_source.fetch.assert_not_called()
        with pytest.raises(InvalidInputError):
            run.raise_for_error()

    @pytest.mark.parametrize(
        "exc", [AcquisitionError(URL, RuntimeError("boom")), ConnectionError("offline")]
    )
    async def test_fetch_failure_degrades(self, mock_source, exc):
        mock_source.fetch = AsyncMock(side_effect=exc)
        cache = MemoryMetadataCache()
        run = await PipelineOrchestrator(mock_source, cache=cache).generate(URL, "imrad", 3, "en")
        assert run.succeeded
        assert run.degraded
        assert run.metadata.degraded
        assert run.metadata.full_name == "acme/toeic-study-app"
        assert len(run.presentation.slides) == 6
        assert len(cache) == 0

    async def test_unexpected_error_ends_in_error_state(self, mock_source):
        mock_source.fetch = AsyncMock(side_effect=RuntimeError("bug"))
        run = await PipelineOrchestrator(mock_source).generate(URL)
        assert run.stage == Stage.error
        assert run.error == "bug"
        assert run.history[-1].error == "RuntimeError"
        assert run.history[-1].progress == 0

    async def test_raising_callback_does_not_escape(self, mock_source):
        def on_progress(event):
            raise RuntimeError("listener gone")

        run = await PipelineOrchestrator(mock_source).generate(URL, on_progress=on_progress)
        assert run.stage == Stage.error
        assert run.error == "listener gone"
        assert run.history[-1].stage == Stage.error
        assert run.finished_at is not None

    async def test_pre_cancelled(self, mock_source):
        token = CancellationToken()
        token.cancel("user left")
        run = await PipelineOrchestrator(mock_source).generate(URL, cancel=token)
        assert run.stage == Stage.error
        assert isinstance(run.exception, GenerationCancelled)
        mock_source.fetch.assert_not_called()

    async def test_cancelled_during_fetch(self, mock_source, sample_metadata):
        token = CancellationToken()

        async def fetch(url, cancel=None):
            token.cancel()
            return sample_metadata

        mock_source.fetch = AsyncMock(side_effect=fetch)
        run = await PipelineOrchestrator(mock_source).generate(URL, cancel=token)
        assert run.stage == Stage.error
        assert run.failed_stage == Stage.repository
        assert run.insights is None
        assert run.presentation is None

    async def test_failing_store_does_not_fail_run(self, mock_source):
        store = MagicMock()
        store.save.side_effect = OSError("disk full")
        run = await PipelineOrchestrator(mock_source, store=store).generate(URL)
        assert run.succeeded
        assert run.saved_to is None
        store.save.assert_called_once()
