"""Event system tests.

These tests verify:
- ImportEvents pub/sub functionality
- EventNames constants
- Importer publishes one event per resolution outcome
"""

from __future__ import annotations

import pytest

from sass_import_resolver import (
    CIRCULAR_STANDIN,
    EventNames,
    ImportEvent,
    ImportEvents,
    Importer,
    ImportResolutionError,
)
from tests.conftest import FailingProbe


class TestImportEvents:
    def test_subscribe_and_publish(self):
        events = ImportEvents()
        received = []
        events.subscribe(EventNames.IMPORT_RESOLVED, received.append)

        payload = ImportEvent(specifier="a", referrer="/b.scss", file="/a.scss")
        events.publish(EventNames.IMPORT_RESOLVED, payload)

        assert received == [payload]

    def test_publish_without_listeners_is_noop(self):
        ImportEvents().publish(
            EventNames.IMPORT_FAILED, ImportEvent(specifier="a", referrer="/b.scss")
        )

    def test_subscribe_once(self):
        events = ImportEvents()
        received = []
        events.subscribe_once(EventNames.IMPORT_CACHED, received.append)

        payload = ImportEvent(specifier="a", referrer="/b.scss")
        events.publish(EventNames.IMPORT_CACHED, payload)
        events.publish(EventNames.IMPORT_CACHED, payload)

        assert len(received) == 1

    def test_unsubscribe_and_listener_count(self):
        events = ImportEvents()
        handler = lambda event: None  # noqa: E731

        events.subscribe(EventNames.IMPORT_NOT_FOUND, handler)
        assert events.listener_count(EventNames.IMPORT_NOT_FOUND) == 1

        events.unsubscribe(EventNames.IMPORT_NOT_FOUND, handler)
        assert events.listener_count(EventNames.IMPORT_NOT_FOUND) == 0

    def test_clear(self):
        events = ImportEvents()
        events.subscribe(EventNames.IMPORT_RESOLVED, lambda event: None)

        events.clear()

        assert events.listener_count(EventNames.IMPORT_RESOLVED) == 0

    def test_event_names(self):
        assert EventNames.IMPORT_RESOLVED == "import.resolved"
        assert EventNames.IMPORT_CACHED == "import.cached"
        assert EventNames.IMPORT_CIRCULAR == "import.circular"
        assert EventNames.IMPORT_NOT_FOUND == "import.not_found"
        assert EventNames.IMPORT_FAILED == "import.failed"
        assert len(set(EventNames.ALL)) == 5


class TestImporterEvents:
    @pytest.fixture
    def recorder(self):
        received: dict[str, list[ImportEvent]] = {name: [] for name in EventNames.ALL}
        return received

    def _subscribe_all(self, importer, recorder):
        for name in EventNames.ALL:
            importer.events.subscribe(name, recorder[name].append)

    def test_resolved_then_cached(self, project, recorder):
        importer = Importer(resolvers=["local"])
        self._subscribe_all(importer, recorder)
        index = str(project / "index.scss")

        importer.resolve("second", index)
        importer.resolve("second", index)

        resolved = recorder[EventNames.IMPORT_RESOLVED]
        assert len(resolved) == 1
        assert resolved[0].file == str(project / "second.scss")
        assert resolved[0].strategy == "local"
        assert resolved[0].base_directory == str(project)
        assert [e.file for e in recorder[EventNames.IMPORT_CACHED]] == [
            str(project / "second.scss")
        ]

    def test_circular(self, project, recorder):
        importer = Importer(resolvers=["local"])
        self._subscribe_all(importer, recorder)

        importer.resolve("b", str(project / "a.scss"))
        result = importer.resolve("a", str(project / "b.scss"))

        circular = recorder[EventNames.IMPORT_CIRCULAR]
        assert result.file == CIRCULAR_STANDIN
        assert len(circular) == 1
        assert circular[0].file == str(project / "a.scss")
        assert circular[0].referrer == str(project / "b.scss")

    def test_not_found(self, project, recorder):
        importer = Importer(resolvers=["local"])
        self._subscribe_all(importer, recorder)

        importer.resolve("missing", str(project / "index.scss"))

        assert [e.specifier for e in recorder[EventNames.IMPORT_NOT_FOUND]] == ["missing"]
        assert recorder[EventNames.IMPORT_RESOLVED] == []

    def test_failed(self, project, recorder):
        importer = Importer(
            resolvers=["local"],
            file_probe=FailingProbe(lambda path: True),
        )
        self._subscribe_all(importer, recorder)

        with pytest.raises(ImportResolutionError):
            importer.resolve("second", str(project / "index.scss"))

        failed = recorder[EventNames.IMPORT_FAILED]
        assert len(failed) == 1
        assert failed[0].error is not None
        assert "Permission denied" in failed[0].error
