from dirsnap.exclusion_rules.matcher import compile_matcher
from dirsnap.exclusion_rules.snapshot_rules import SnapshotIgnoreExclusionRules


def test_reserved_directory_excluded_with_empty_rules():
    matcher = compile_matcher([])
    assert matcher.exclude("snapshots")
    assert matcher.exclude("snapshots/Sat-11-22-2025/snap.md")
    assert not matcher.exclude("src/main.py")


def test_reserved_directory_excluded_regardless_of_rules():
    matcher = compile_matcher(["*.py", "docs"])
    assert matcher.exclude("snapshots")
    assert matcher.exclude("snapshots/readme.txt")


def test_custom_reserved_name():
    matcher = compile_matcher(reserved_name="out")
    assert matcher.exclude("out/x.md")
    assert not matcher.exclude("snapshots/x.md")


def test_rules_are_applied():
    matcher = compile_matcher(["# comment", "node_modules", "*.log"])
    assert matcher.exclude("node_modules")
    assert matcher.exclude("packages/web/node_modules/left-pad/index.js")
    assert matcher.exclude("logs/app.log")
    assert not matcher.exclude("src/app.js")


def test_raw_lines_are_appended_to_existing_rules():
    ignore_rules = SnapshotIgnoreExclusionRules.from_lines(["build"])
    matcher = compile_matcher(["*.log"], ignore_rules=ignore_rules)

    assert ignore_rules.rules == ["build", "*.log"]
    assert matcher.exclude("build/out.js")
    assert matcher.exclude("app.log")


def test_exclude_path_with_absolute_paths():
    matcher = compile_matcher(["build"])
    assert matcher.exclude_path("/proj/snapshots", "/proj")
    assert matcher.exclude_path("/proj/a/build", "/proj")
    assert not matcher.exclude_path("/proj/builder/x.js", "/proj")
