import unittest
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

from analytics.constants import LIBRARY_NAME
from analytics.meta import get_library_identity, get_version


class TestMeta(unittest.TestCase):
    """Test cases for the meta module."""

    def setUp(self):
        get_version.cache_clear()

    def tearDown(self):
        get_version.cache_clear()

    @patch("analytics.meta.version")
    def test_get_version_reads_distribution(self, mock_version):
        """Test that get_version asks for the rudder-analytics distribution."""
        mock_version.return_value = "1.0.0"

        self.assertEqual(get_version(), "1.0.0")
        mock_version.assert_called_once_with(LIBRARY_NAME)

    @patch("analytics.meta.version")
    def test_get_version_not_installed(self, mock_version):
        """Test that a missing distribution yields None."""
        mock_version.side_effect = PackageNotFoundError(LIBRARY_NAME)

        with self.assertLogs("analytics.meta", level="ERROR"):
            self.assertIsNone(get_version())

    @patch("analytics.meta.version")
    def test_get_version_is_cached(self, mock_version):
        """Test that the metadata lookup and its failure log happen once."""
        mock_version.side_effect = PackageNotFoundError(LIBRARY_NAME)

        with self.assertLogs("analytics.meta", level="ERROR") as logs:
            self.assertIsNone(get_version())
            self.assertIsNone(get_version())

        self.assertEqual(len(logs.records), 1)
        mock_version.assert_called_once_with(LIBRARY_NAME)

    @patch("analytics.meta.get_version")
    def test_get_library_identity(self, mock_get_version):
        """Test the name and version stamped on contexts."""
        mock_get_version.return_value = "2.3.4"

        self.assertEqual(get_library_identity(), ("rudder-analytics", "2.3.4"))

    @patch("analytics.meta.get_version")
    def test_get_library_identity_unknown_version(self, mock_get_version):
        """Test the fallback when the version cannot be determined."""
        mock_get_version.return_value = None

        self.assertEqual(get_library_identity(), ("rudder-analytics", "unknown"))


if __name__ == "__main__":
    unittest.main()
