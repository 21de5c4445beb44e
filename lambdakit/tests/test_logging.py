from lambdakit.logging import get_logger
import logging
import unittest


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class TestLambdaKitLogger(unittest.TestCase):
    def setUp(self) -> None:
        self.handler = _RecordingHandler()
        self.base = logging.getLogger('lambdakit.tests.logging')
        self.base.addHandler(self.handler)
        self.base.setLevel(logging.DEBUG)
        self.base.propagate = False
        self.logger = get_logger('lambdakit.tests.logging')

    def tearDown(self) -> None:
        self.base.removeHandler(self.handler)

    def test_format_syntax(self) -> None:
        self.logger.info('{} of {total}', 1, total=3)
        (record,) = self.handler.records
        self.assertEqual('1 of 3', record.getMessage())
        self.assertEqual('INFO', record.levelname)

    def test_caller_location(self) -> None:
        self.logger.warning('here')
        (record,) = self.handler.records
        self.assertEqual('test_caller_location', record.caller.function)
        self.assertTrue(record.caller.filename.endswith('test_logging.py'))

    def test_exception_info(self) -> None:
        try:
            raise KeyError('k')
        except KeyError:
            self.logger.error('failed', exc_info=True)
        (record,) = self.handler.records
        self.assertIs(KeyError, record.exc_info[0])

    def test_disabled_level_is_skipped(self) -> None:
        self.base.setLevel(logging.INFO)
        self.logger.debug('hidden {}', 1)
        self.assertEqual([], self.handler.records)

    def test_formatting_is_deferred(self) -> None:
        class Loud:
            formatted = 0

            def __format__(self, spec: str) -> str:
                Loud.formatted += 1
                return 'loud'

        self.logger.debug('{}', Loud())
        self.assertEqual(0, Loud.formatted)
        self.assertEqual('loud', self.handler.records[0].getMessage())
        self.assertEqual(1, Loud.formatted)
