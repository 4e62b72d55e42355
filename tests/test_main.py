import io, os, tempfile, unittest
from contextlib import redirect_stdout, redirect_stderr
from unicharset import __main__ as cli, regexp


class TestCommandLine(unittest.TestCase):
	def run_cli(self, *argv):
		out, err = io.StringIO(), io.StringIO()
		with redirect_stdout(out), redirect_stderr(err):
			cli.main(cli.parse_arguments(list(argv)))
		return out.getvalue().strip()

	def test_00_literal_text(self):
		self.assertEqual('[a-c]', self.run_cli('cab'))
		self.assertEqual('abc', self.run_cli('cab', '--format', 'string'))
		self.assertEqual('97,98,99', self.run_cli('cab', '--format', 'array'))

	def test_01_unicode_range(self):
		self.assertEqual('[\\uFFFE\\uFFFF]|\\uD800[\\uDC00\\uDC01]', self.run_cli('-u', 'U+FFFE-10001'))
		self.assertEqual('U+10-1F', self.run_cli('-u', 'u+1?', '--format', 'hex-range'))
		self.assertEqual('U+41,U+42', self.run_cli('--unicode-range', 'U+41-42', '--format', 'hex'))

	def test_02_file(self):
		with tempfile.TemporaryDirectory() as folder:
			path = os.path.join(folder, 'sample.txt')
			with open(path, 'w', encoding='utf-8') as fh: fh.write('ba\nab')
			self.assertEqual('[\\u000Aab]', self.run_cli('-f', path, '--format', 'range'))

	def test_03_missing_file(self):
		with self.assertRaises(SystemExit) as caught:
			self.run_cli('-f', os.path.join(tempfile.gettempdir(), 'no-such-file-for-unicharset.txt'))
		self.assertEqual(1, caught.exception.code)

	def test_04_empty_selection(self):
		with self.assertRaises(SystemExit) as caught: self.run_cli('-u', 'nonsense')
		self.assertEqual(1, caught.exception.code)
		self.assertEqual('', self.run_cli('-u', 'nonsense', '--allow-empty'))

	def test_05_verbose(self):
		try: output = self.run_cli('-v', 'a')
		finally: regexp.VERBOSE = False
		self.assertIn('Pattern synthesis', output)


if __name__ == '__main__':
	unittest.main()
