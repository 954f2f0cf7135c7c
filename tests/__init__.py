# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for georules_logger:
# - test_colors.py: Hue scheduling and HSL conversion
# - test_stream.py: Tinting of text chunks
# - test_levels.py / test_config.py: Level names and settings
# - test_formatters.py / test_handlers.py / test_factory.py: Logging pipeline
# - test_middleware.py: FastAPI request logging
#
# Run tests with: poetry run pytest
# =============================================================================
