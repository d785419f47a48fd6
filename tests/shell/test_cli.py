"""Tests for the command line entry point."""

import pytest

from quake_forecaster.cli import build_parser, main


@pytest.fixture
def feed_file(tmp_path, feed_header, make_record):
    path = tmp_path / "feed.csv"
    path.write_text(
        "\n".join([
            feed_header,
            make_record(event_id="sf1", magnitude="2.5", latitude="37.7749",
                        longitude="-122.4194", time="2015-03-01T10:00:00.000Z"),
            make_record(event_id="sf2", magnitude="4.1", latitude="37.8044",
                        longitude="-122.2712", time="2015-03-02T10:00:00.000Z"),
            make_record(event_id="sf3", magnitude="3.3", latitude="37.7000",
                        longitude="-122.4000", time="2015-03-03T10:00:00.000Z"),
            make_record(event_id="la1", magnitude="5.6", latitude="34.0522",
                        longitude="-118.2437", time="2015-04-01T00:00:00.000Z"),
            "not,a,record",
        ]),
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "missing.yaml")]


class TestBuildParser:
    """Tests for build_parser()."""

    def test_requires_command(self):
        """A subcommand is required."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_parses_dates(self):
        """Dates are parsed as ISO dates."""
        args = build_parser().parse_args(["top", "--start", "2015-01-01", "--end", "2015-02-01"])

        assert args.start.isoformat() == "2015-01-01"
        assert args.limit is None

    @pytest.mark.parametrize("limit", ["0", "-3", "ten"])
    def test_rejects_non_positive_limit(self, limit):
        """--limit must be a positive integer."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(
                ["top", "--start", "2015-01-01", "--end", "2015-02-01", "--limit", limit]
            )


class TestMain:
    """Tests for main()."""

    def test_lookup(self, feed_file, no_config, capsys):
        """Prints matching earthquakes largest first."""
        code = main(no_config + [
            "--feed", feed_file, "lookup",
            "--lat", "37.7749", "--lon", "-122.4194", "--radius", "20",
            "--start", "2015-03-01", "--end", "2015-03-31",
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert "3 earthquakes within 20 km" in out
        assert out.index("[sf2]") < out.index("[sf3]") < out.index("[sf1]")
        assert "[la1]" not in out

    def test_top(self, feed_file, no_config, capsys):
        """Prints the largest earthquakes."""
        code = main(no_config + [
            "--feed", feed_file, "top", "--start", "2015-01-01", "--end", "2015-12-31",
            "--limit", "1",
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert "[la1]" in out
        assert "[sf2]" not in out

    def test_hotspot(self, feed_file, no_config, capsys):
        """Prints the hotspot center and neighborhood."""
        code = main(no_config + ["--feed", feed_file, "hotspot", "--radius", "20"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("Hotspot: sf2 ")
        assert "3 earthquakes within 20 km" in out

    def test_invalid_parameters(self, feed_file, no_config):
        """Validation failures exit with code 2."""
        code = main(no_config + [
            "--feed", feed_file, "top", "--start", "2009-01-01", "--end", "2015-12-31",
        ])

        assert code == 2

    def test_missing_feed(self, tmp_path, no_config):
        """An unreadable feed exits with code 1."""
        code = main(no_config + ["--feed", str(tmp_path / "missing.csv"), "hotspot"])

        assert code == 1

    def test_hotspot_needs_two_events(self, tmp_path, no_config, make_record):
        """A single earthquake cannot produce a hotspot."""
        path = tmp_path / "feed.csv"
        path.write_text(make_record(), encoding="utf-8")

        assert main(no_config + ["--feed", str(path), "hotspot"]) == 1
