"""Test the logging setup."""

import logging

from layoutgrid import (
    LOGGER, PROGRESS_LOGGER, BoxConstraints, Fixed, Item, LayoutGrid)
from layoutgrid.logger import CallbackHandler

from .testing_utils import assert_no_logs, capture_logs


def test_loggers():
    assert LOGGER.name == 'layoutgrid'
    assert PROGRESS_LOGGER.name == 'layoutgrid.progress'
    assert PROGRESS_LOGGER.parent is LOGGER


def test_capture_logs():
    handlers = LOGGER.handlers
    with capture_logs() as logs:
        LOGGER.warning('Grid %s', 'warning')
        LOGGER.info('Grid info')
        LOGGER.debug('Grid debug')
        PROGRESS_LOGGER.info('Step 1 - Placing grid items')
        PROGRESS_LOGGER.warning('Step 1 - Placing grid items')
    assert logs == ['WARNING: Grid warning', 'INFO: Grid info']
    assert LOGGER.handlers == handlers


def test_capture_logs_level():
    with capture_logs(level=logging.WARNING) as logs:
        LOGGER.info('Grid info')
        LOGGER.error('Grid error')
    assert logs == ['ERROR: Grid error']


def test_nested_capture_logs():
    with capture_logs() as outer_logs:
        with capture_logs() as inner_logs:
            LOGGER.warning('inner')
        LOGGER.warning('outer')
    assert inner_logs == ['WARNING: inner']
    assert outer_logs == ['WARNING: outer']


def test_callback_handler():
    records = []
    handler = CallbackHandler(records.append)
    logger = logging.getLogger('layoutgrid.tests')
    logger.addHandler(handler)
    try:
        with capture_logs():
            logger.warning('callback')
    finally:
        logger.removeHandler(handler)
    assert [record.getMessage() for record in records] == ['callback']


@assert_no_logs
def test_progress(caplog):
    grid = LayoutGrid([Item()], template_column_sizes=(Fixed(10),))
    with caplog.at_level(logging.INFO, logger='layoutgrid.progress'):
        grid.layout(BoxConstraints())
        grid.layout(BoxConstraints())
    messages = [
        record.getMessage() for record in caplog.records
        if record.name == 'layoutgrid.progress']
    assert messages == [
        'Step 1 - Placing grid items',
        'Step 2 - Sizing grid columns',
        'Step 3 - Sizing grid rows',
        'Step 4 - Positioning grid items',
        'Step 2 - Sizing grid columns',
        'Step 3 - Sizing grid rows',
        'Step 4 - Positioning grid items',
    ]
