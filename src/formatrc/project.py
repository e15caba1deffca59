from .models import FormatConfig

PROJECT_CONFIG = FormatConfig.from_mapping(
    {
        "overrides": [
            {"files": "*.md", "options": {"tabWidth": 2}},
            {"files": "*.svg", "options": {"parser": "html"}},
        ],
        "printWidth": 100,
        "tabWidth": 4,
    }
)
