"""
Tests for share name utilities.
"""

from save_to_nas.utils.share_names import (
    build_export_pattern,
    build_mount_pattern,
    candidate_mount_paths,
    hyphens_to_spaces,
    join_under,
    strip_volume_prefix,
    to_local_name,
)


class TestNameTransforms:
    """Test the share name transformations."""

    def test_strip_volume_prefix(self):
        assert strip_volume_prefix("/volume1/Documents", "/volume1") == "Documents"

    def test_strip_volume_prefix_keeps_nested_path(self):
        assert strip_volume_prefix("/volume1/media/photos", "/volume1") == "media/photos"

    def test_strip_volume_prefix_only_strips_leading_prefix(self):
        assert strip_volume_prefix("/other/volume1/x", "/volume1") == "/other/volume1/x"

    def test_to_local_name_replaces_every_space(self):
        assert to_local_name("My Big Share") == "My-Big-Share"

    def test_hyphens_to_spaces(self):
        assert hyphens_to_spaces("My-Big-Share") == "My Big Share"


class TestPaths:
    """Test mount path construction."""

    def test_join_under(self):
        assert join_under("/mnt/nas", "Documents") == "/mnt/nas/Documents"

    def test_join_under_keeps_absolute_names_under_base(self):
        assert join_under("/mnt/nas", "/Documents") == "/mnt/nas/Documents"

    def test_candidate_mount_paths_order(self):
        result = candidate_mount_paths("/mnt/nas", "My Share-2")

        assert result == [
            "/mnt/nas/My Share-2",
            "/mnt/nas/My-Share-2",
            "/mnt/nas/My Share 2",
        ]


class TestPatterns:
    """Test the command output patterns."""

    def test_export_pattern_matches_leading_path(self):
        match = build_export_pattern("/volume1").match("/volume1/Documents  10.0.0.0/24")

        assert match.group(1) == "/volume1/Documents"

    def test_export_pattern_rejects_other_volumes(self):
        assert build_export_pattern("/volume1").match("/volumeUSB1/usbshare *") is None

    def test_mount_pattern_escapes_dots_in_host(self):
        pattern = build_mount_pattern("10.0.0.50", "/volume1")

        assert pattern.match("10x0x0x50:/volume1/Documents on /mnt/nas/Documents type nfs") is None

    def test_mount_pattern_extracts_export_and_local_path(self):
        pattern = build_mount_pattern("10.0.0.50", "/volume1")

        match = pattern.match("10.0.0.50:/volume1/Documents on /mnt/nas/Documents type nfs (rw)")

        assert match.group(1) == "/volume1/Documents"
        assert match.group(2) == "/mnt/nas/Documents"
