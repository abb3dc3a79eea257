import sys
import os
import unittest
from unittest.mock import patch, MagicMock
from datetime import date
from io import StringIO

# Add the parent directory to sys.path to import the harvestpy package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from harvestpy.__main__ import main, parse_args, build_client, fetch_entries
from harvestpy.api.context import Context
from harvestpy.api.errors import AuthError, ErrorResponse
from harvestpy.api.time_entries import TimeEntriesListOptions
from harvestpy.models.time_entry import TimeEntry, Project, User, Task
from harvestpy.reports.report_generator import ReportGenerator
from harvestpy.utils.format_utils import format_hours, percent
from harvestpy.utils.date_utils import lookback_range, parse_date, day_str

class TestHarvestpyCli(unittest.TestCase):
    """Test the command line program."""

    def setUp(self):
        """Set up test fixtures."""
        self.env_patcher = patch.dict('os.environ', {
            'HARVEST_ACCESS_TOKEN': 'test_token',
            'HARVEST_ACCOUNT_ID': 'test_account',
        })
        self.env_patcher.start()

        self.entries = [
            TimeEntry(id=1, hours=1.5, notes="Kickoff", spent_date="2024-01-02",
                      project=Project(10, "Website"), user=User(20, "Sam"), task=Task(30, "Meetings")),
            TimeEntry(id=2, hours=0.5, notes="Fix header", spent_date="2024-01-03",
                      project=Project(10, "Website"), user=User(20, "Sam"), task=Task(31, "Development")),
            TimeEntry(id=3, hours=2.0, notes="", spent_date="2024-01-03",
                      project=Project(11, "Mobile App"), user=User(21, "Alex"), task=Task(31, "Development")),
        ]

    def tearDown(self):
        """Tear down test fixtures."""
        self.env_patcher.stop()

    def test_parse_args_defaults(self):
        args = parse_args([])
        self.assertIsNone(args.from_date)
        self.assertIsNone(args.to_date)
        self.assertEqual(args.page, 1)
        self.assertEqual(args.per_page, 100)
        self.assertFalse(args.all)

    def test_parse_args_dates(self):
        args = parse_args(['--from', '2024-01-01', '--to', '2024-01-15', '--all', '--csv', 'jan'])
        self.assertEqual(args.from_date, date(2024, 1, 1))
        self.assertEqual(args.to_date, date(2024, 1, 15))
        self.assertTrue(args.all)
        self.assertEqual(args.csv, 'jan')

    def test_build_client_from_environment(self):
        client = build_client()
        self.assertEqual(client.access_token, 'test_token')
        self.assertEqual(client.account_id, 'test_account')
        self.assertEqual(client.base_url, 'https://api.harvestapp.com/')

    @patch('sys.stdout', new_callable=StringIO)
    def test_missing_token_exits(self, mock_stdout):
        with patch.dict('os.environ', {'HARVEST_ACCESS_TOKEN': ''}):
            with self.assertRaises(SystemExit) as cm:
                build_client()
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("HARVEST_ACCESS_TOKEN", mock_stdout.getvalue())

    def test_fetch_entries_single_page(self):
        client = MagicMock()
        resp = MagicMock(last_page=3)
        resp.pagination.page = 1
        client.time_entries.list.return_value = (self.entries, resp)
        ctx = Context.background()
        opts = TimeEntriesListOptions(page=1)

        result = fetch_entries(client, ctx, opts)

        self.assertEqual(result, self.entries)
        client.time_entries.list.assert_called_once_with(ctx, opts)
        client.time_entries.iter_all.assert_not_called()

    def test_fetch_entries_all_pages(self):
        client = MagicMock()
        client.time_entries.iter_all.return_value = iter(self.entries)

        result = fetch_entries(client, Context.background(), TimeEntriesListOptions(), follow_all=True)

        self.assertEqual(result, self.entries)
        client.time_entries.list.assert_not_called()

    @patch('harvestpy.__main__.fetch_entries')
    @patch('harvestpy.__main__.load_environment')
    @patch('sys.stdout', new_callable=StringIO)
    def test_main_prints_tables(self, mock_stdout, mock_load_env, mock_fetch):
        """Test that main prints the entries and the per-project summary."""
        mock_fetch.return_value = self.entries

        main(['--from', '2024-01-01', '--to', '2024-01-15'])

        output = mock_stdout.getvalue()
        self.assertIn("Found 3 time entries", output)
        self.assertIn("### Time Entries (Mo)2024-01-01 to (Mo)2024-01-15", output)
        self.assertIn("### Time by Project", output)
        self.assertIn("Mobile App", output)
        self.assertIn("Total: 04:00 in 3 entries", output)

        client, ctx, opts, follow_all = mock_fetch.call_args.args
        self.assertEqual(opts, TimeEntriesListOptions(from_date="2024-01-01", to_date="2024-01-15", page=1, per_page=100))
        self.assertFalse(follow_all)
        self.assertIsNotNone(ctx.remaining())

    @patch('harvestpy.__main__.fetch_entries', return_value=[])
    @patch('harvestpy.__main__.load_environment')
    @patch('sys.stdout', new_callable=StringIO)
    def test_main_no_entries(self, mock_stdout, mock_load_env, mock_fetch):
        main(['--from', '2024-01-01', '--to', '2024-01-15'])
        self.assertIn("No time entries found", mock_stdout.getvalue())

    @patch('harvestpy.__main__.fetch_entries')
    @patch('harvestpy.__main__.load_environment')
    @patch('sys.stdout', new_callable=StringIO)
    def test_main_auth_error(self, mock_stdout, mock_load_env, mock_fetch):
        mock_fetch.side_effect = AuthError(MagicMock(status_code=401), "invalid_token", "expired")
        with self.assertRaises(SystemExit) as cm:
            main([])
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("invalid_token expired", mock_stdout.getvalue())

    @patch('harvestpy.__main__.fetch_entries')
    @patch('harvestpy.__main__.load_environment')
    @patch('sys.stdout', new_callable=StringIO)
    def test_main_api_error(self, mock_stdout, mock_load_env, mock_fetch):
        response = MagicMock(status_code=500, url="https://api.harvestapp.com/v2/time_entries")
        response.request.method = "GET"
        response.request.url = "https://api.harvestapp.com/v2/time_entries"
        mock_fetch.side_effect = ErrorResponse(response, "server_error", "try later")
        with self.assertRaises(SystemExit) as cm:
            main([])
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("500 server_error try later", mock_stdout.getvalue())

    @patch('harvestpy.__main__.fetch_entries')
    @patch('harvestpy.__main__.load_environment')
    @patch('sys.stdout', new_callable=StringIO)
    def test_csv_export(self, mock_stdout, mock_load_env, mock_fetch):
        """Test CSV export functionality."""
        mock_fetch.return_value = self.entries

        with patch('harvestpy.reports.report_generator.write_csv') as mock_write_csv:
            main(['--from', '2024-01-01', '--to', '2024-01-15', '--csv', 'test_export'])

        filenames = [c.args[0] for c in mock_write_csv.call_args_list]
        self.assertEqual(filenames, ['test_export_entries.csv', 'test_export_projects.csv'])


class TestReportGenerator(unittest.TestCase):
    """Test the report tables."""

    def setUp(self):
        self.entries = [
            TimeEntry(id=1, hours=3.0, project=Project(1, "Alpha"), spent_date="2024-01-02"),
            TimeEntry(id=2, hours=1.0, project=Project(2, "Beta"), spent_date="2024-01-02"),
            TimeEntry(id=3, hours=0.25, spent_date="2024-01-03"),
        ]

    def test_project_durations(self):
        report_generator = ReportGenerator(self.entries, "test range")
        self.assertEqual(report_generator.total_duration, 15300)
        self.assertEqual(dict(report_generator.project_durations), {"Alpha": 10800, "Beta": 3600, "No project": 900})

    def test_report_contents(self):
        report = ReportGenerator(self.entries, "test range").generate_report()
        self.assertIn("### Time Entries test range:", report)
        self.assertIn("### Time by Project test range:", report)
        self.assertIn("03:00", report)
        self.assertIn("No project", report)
        # Alpha is the biggest project and is listed first
        project_section = report.split("### Time by Project")[1]
        self.assertLess(project_section.index("Alpha"), project_section.index("Beta"))


class TestUtils(unittest.TestCase):
    """Test the date and formatting helpers."""

    def test_format_hours(self):
        test_cases = [
            (0, "00:00"),
            (1.5, "01:30"),
            (0.25, "00:15"),
            (10.75, "10:45"),
            (0.33, "00:19"),
        ]
        for hours, expected in test_cases:
            with self.subTest(hours=hours):
                self.assertEqual(format_hours(hours), expected)

    def test_percent(self):
        self.assertEqual(percent(1, 4), "25")
        self.assertEqual(percent(1, 0), "0")

    def test_lookback_range(self):
        self.assertEqual(lookback_range(14, date(2024, 1, 15)), (date(2024, 1, 1), date(2024, 1, 15)))

    def test_parse_date(self):
        self.assertEqual(parse_date("2024-02-29"), date(2024, 2, 29))
        with self.assertRaises(ValueError):
            parse_date("20240229")

    def test_day_str(self):
        self.assertEqual(day_str(date(2024, 1, 1)), "(Mo)2024-01-01")

if __name__ == '__main__':
    unittest.main()
