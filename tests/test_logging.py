"""Tests for logging configuration, hooks and capture events."""

from __future__ import annotations

import logging
from typing import Any

import pytest
from klaw_fp import Defect, Lazy, option_from, result_from
from klaw_fp._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def cleanup_logging() -> None:
    """Clear log hooks and restore the root logger around each test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    clear_log_hooks()
    yield
    clear_log_hooks()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        logger = get_logger('test')
        logger.info('Test message', extra_field='extra_value')

        test_entries = [e for e in received if e.get('event') == 'Test message']
        assert len(test_entries) == 1
        assert test_entries[0]['extra_field'] == 'extra_value'
        assert test_entries[0]['level'] == 'info'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_clear_hooks(self) -> None:
        """clear_log_hooks() removes all hooks."""
        calls: list[str] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(lambda _: calls.append('hook1'))
        add_log_hook(lambda _: calls.append('hook2'))

        logger = get_logger('test')
        logger.info('First')
        assert calls == ['hook1', 'hook2']

        clear_log_hooks()
        logger.info('Second')
        assert len(calls) == 2

    def test_hook_exception_does_not_break_logging(self) -> None:
        """Exceptions in hooks don't prevent logging or other hooks."""
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('Hook failed')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(bad_hook)
        add_log_hook(lambda _: calls.append('good'))

        get_logger('test').info('Test')

        assert calls == ['good']

    def test_filtered_levels_skip_hooks(self) -> None:
        """Entries below the configured level never reach hooks."""
        received: list[dict[str, Any]] = []

        configure_logging(level='WARNING', json_output=False)
        add_log_hook(received.append)

        logger = get_logger('test')
        logger.debug('hidden')
        logger.warning('shown')

        assert [e['event'] for e in received] == ['shown']


class TestCaptureEvents:
    """Capture sites log what they capture and what they let through."""

    def test_fault_captured_event(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        result_from(lambda: int('x'))

        events = [e for e in received if e.get('event') == 'fault_captured']
        assert len(events) == 1
        assert events[0]['source'] == 'result_from'
        assert events[0]['error_type'] == 'ValueError'
        assert events[0]['logger'] == 'klaw_fp.capture'

    def test_defect_propagated_event(self) -> None:
        class Broken(Defect):
            pass

        def bug():
            raise Broken('invariant')

        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        with pytest.raises(Broken):
            Lazy(bug).to_option()

        events = [e for e in received if e.get('event') == 'defect_propagated']
        assert len(events) == 1
        assert events[0]['source'] == 'Lazy.to_option'
        assert events[0]['error_type'] == 'Broken'

    def test_silent_by_default(self) -> None:
        """Without debug logging enabled, captures emit nothing."""
        received: list[dict[str, Any]] = []
        logging.getLogger().setLevel(logging.WARNING)
        add_log_hook(received.append)

        option_from(lambda: 1 / 0)

        assert received == []
