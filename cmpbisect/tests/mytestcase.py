from __future__ import generator_stop

from cmpbisect.compare import compare_int
from cmpbisect.test import MyTestCase, parametrize


class MyTestCaseTest(MyTestCase):

	@parametrize(
		(None, "3 != 4 : in iteration index 2"),
		("", "3 != 4 : in iteration index 2"),
		("ctx", "3 != 4 : in iteration index 2 : ctx"),
	)
	def test_assert_iter_equal_message(self, msg, truth):
		with self.assertRaises(AssertionError) as cm:
			self.assertIterEqual([1, 2, 3], [1, 2, 4], msg)
		self.assertEqual(truth, str(cm.exception))

	def test_assert_iter_equal(self):
		self.assertIterEqual([1, 2, 3], iter([1, 2, 3]))
		with self.assertRaises(AssertionError):
			self.assertIterEqual([1, 2], [1, 2, 3])

	def test_assert_sorted(self):
		self.assertSorted([1, 2, 2, 3], compare_int)
		self.assertSorted([], compare_int)
		with self.assertRaisesRegex(AssertionError, "not sorted at index 2"):
			self.assertSorted([1, 3, 2], compare_int)


if __name__ == "__main__":
	import unittest

	unittest.main()
