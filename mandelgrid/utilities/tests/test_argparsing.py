"""
  Test of the command line parser within argparsing.py
"""

import unittest
import io
from contextlib import redirect_stderr

from mandelgrid.utilities.argparsing import parse_dimensions
from mandelgrid.utilities.argparsing import create_standard_parser
from mandelgrid.mandelgrid_exceptions import ParsingError


#-------------------------------------------------------------

class Test_Argparsing(unittest.TestCase):

    def test_parse_dimensions(self):
        assert parse_dimensions('80x20') == (80, 20)
        assert parse_dimensions('1x1') == (1, 1)
        assert parse_dimensions('0x5') == (0, 5)


    def test_parse_dimensions_bad_format(self):
        for s in ['80', '80x20x3', '', '80X20']:
            self.assertRaises(ParsingError, parse_dimensions, s)

        try:
            parse_dimensions('80')
        except ParsingError as e:
            assert 'expected <width>x<height>' in str(e)


    def test_parse_dimensions_not_integers(self):
        for s in ['axb', '80x', 'x20', '8.5x2']:
            self.assertRaises(ParsingError, parse_dimensions, s)


    def test_defaults(self):
        parser = create_standard_parser()
        args = parser.parse_args([])

        assert args.dims == (80, 20)
        assert args.bound == 255
        assert args.ascii is False
        assert args.np == 1
        assert args.schedule == 'rows'
        assert args.verbose is False
        assert args.logfile is None
        assert args.filename is None


    def test_options(self):
        parser = create_standard_parser()
        args = parser.parse_args(['-v', '-d', '640x480', '-b', '1000', '-a',
                                  '-np', '4', '--schedule', 'cyclic',
                                  'out.txt'])

        assert args.dims == (640, 480)
        assert args.bound == 1000
        assert args.ascii is True
        assert args.np == 4
        assert args.schedule == 'cyclic'
        assert args.verbose is True
        assert args.filename == 'out.txt'


    def test_verbose_takes_no_value(self):
        parser = create_standard_parser()

        args = parser.parse_args(['-v'])
        assert args.verbose is True

        args = parser.parse_args(['-v', 'mandel.png'])
        assert args.verbose is True
        assert args.filename == 'mandel.png'


    def test_invalid_arguments(self):
        parser = create_standard_parser()
        for argv in [['-d', '80'], ['-b', '-1'], ['-b', 'many'],
                     ['-np', '-2'], ['--schedule', 'dynamic']]:
            with redirect_stderr(io.StringIO()):
                self.assertRaises(SystemExit, parser.parse_args, argv)


#-------------------------------------------------------------
if __name__ == "__main__":
    suite = unittest.TestLoader().loadTestsFromTestCase(Test_Argparsing)
    runner = unittest.TextTestRunner()
    runner.run(suite)
