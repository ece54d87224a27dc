from runic_quotes.preferences.models import (
    AppTheme,
    Preferences,
    ReadingPreset,
    RunicFont,
    WidgetMode,
    WidgetStyle,
)

__all__ = ["AppTheme", "Preferences", "ReadingPreset", "RunicFont", "WidgetMode", "WidgetStyle"]
