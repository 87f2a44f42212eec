"""
  Test of the logging module log.py
"""

import unittest
import io
import os
import tempfile
from contextlib import redirect_stdout, redirect_stderr

import mandelgrid.utilities.log as log


#-------------------------------------------------------------

class Test_Log(unittest.TestCase):

    def setUp(self):
        self.old_console_level = log.console_logging_level
        self.old_log_level = log.log_logging_level
        self.old_filename = log.log_filename

        fd, self.filename = tempfile.mkstemp('.log')
        os.close(fd)

        log.reset()
        log.console_logging_level = log.CRITICAL + 1
        log.log_logging_level = log.INFO
        log.log_filename = self.filename

    def tearDown(self):
        log.reset()
        log.console_logging_level = self.old_console_level
        log.log_logging_level = self.old_log_level
        log.log_filename = self.old_filename
        os.remove(self.filename)


    def test_logfile(self):
        log.setup()
        log.info('message at INFO')
        log.debug('message at DEBUG')
        log.critical('message at CRITICAL')
        log.timingInfo('elapsed, 1.5')
        log.reset()

        with open(self.filename) as fid:
            text = fid.read()

        assert 'message at INFO' in text
        assert 'message at DEBUG' not in text
        assert 'message at CRITICAL' in text
        assert log.TimingDelimiter + 'elapsed, 1.5' in text

        # Caller is this module, not the log module
        assert 'test_log:' in text


    def test_console_writes_to_stderr(self):
        log.reset()
        log.console_logging_level = log.INFO
        log.log_filename = None

        out = io.StringIO()
        err = io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            log.setup()
            log.info('message at INFO')

        assert out.getvalue() == ''
        assert 'message at INFO' in err.getvalue()


    def test_reset(self):
        log.setup()
        assert log._setup
        log.reset()
        assert not log._setup


#-------------------------------------------------------------
if __name__ == "__main__":
    suite = unittest.TestLoader().loadTestsFromTestCase(Test_Log)
    runner = unittest.TextTestRunner()
    runner.run(suite)
