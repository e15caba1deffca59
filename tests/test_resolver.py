from formatrc.models import FormatConfig
from formatrc.project import PROJECT_CONFIG
from formatrc.resolver import matches, resolve_options


def test_markdown_override():
    assert resolve_options(PROJECT_CONFIG, "README.md") == {"printWidth": 100, "tabWidth": 2}


def test_svg_override():
    assert resolve_options(PROJECT_CONFIG, "assets/logo.svg") == {
        "printWidth": 100,
        "tabWidth": 4,
        "parser": "html",
    }


def test_no_override():
    assert resolve_options(PROJECT_CONFIG, "src/main.rs") == {"printWidth": 100, "tabWidth": 4}


def test_basename_pattern_matches_nested_path():
    rule = PROJECT_CONFIG.overrides[0]
    assert matches(rule, "docs/guide/intro.md")
    assert not matches(rule, "docs/intro.md.bak")


def test_matching_is_case_sensitive():
    assert not matches(PROJECT_CONFIG.overrides[0], "NOTES.MD")


def test_later_override_wins():
    config = FormatConfig.from_mapping(
        {
            "tabWidth": 4,
            "overrides": [
                {"files": "*.md", "options": {"tabWidth": 2, "proseWrap": "always"}},
                {"files": "CHANGELOG.md", "options": {"tabWidth": 8}},
            ],
        }
    )
    assert resolve_options(config, "CHANGELOG.md") == {"tabWidth": 8, "proseWrap": "always"}
    assert resolve_options(config, "README.md") == {"tabWidth": 2, "proseWrap": "always"}


def test_path_pattern_uses_relative_path(tmp_path):
    config = FormatConfig.from_mapping(
        {"overrides": [{"files": "docs/*.md", "options": {"tabWidth": 3}}]}
    )
    target = tmp_path / "docs" / "a.md"
    assert resolve_options(config, target, root=tmp_path) == {"tabWidth": 3}
    assert resolve_options(config, tmp_path / "a.md", root=tmp_path) == {}
    assert resolve_options(config, "docs/a.md") == {"tabWidth": 3}


def test_double_star_prefix_matches_top_level():
    config = FormatConfig.from_mapping({"overrides": [{"files": "**/*.yml", "options": {"tabWidth": 2}}]})
    assert resolve_options(config, "ci.yml") == {"tabWidth": 2}
    assert resolve_options(config, ".github/workflows/ci.yml") == {"tabWidth": 2}


def test_exclude_files():
    config = FormatConfig.from_mapping(
        {"overrides": [{"files": "*.js", "excludeFiles": ["*.min.js"], "options": {"semi": False}}]}
    )
    assert resolve_options(config, "app.js") == {"semi": False}
    assert resolve_options(config, "app.min.js") == {}


def test_with_defaults_fills_unset():
    options = resolve_options(PROJECT_CONFIG, "README.md", with_defaults=True)
    assert options["tabWidth"] == 2
    assert options["printWidth"] == 100
    assert options["semi"] is True
    assert options["trailingComma"] == "all"
    assert "parser" not in options


def test_resolution_does_not_mutate_config():
    before = PROJECT_CONFIG.to_dict()
    resolve_options(PROJECT_CONFIG, "logo.svg")
    resolve_options(PROJECT_CONFIG, "README.md", with_defaults=True)
    assert PROJECT_CONFIG.to_dict() == before
