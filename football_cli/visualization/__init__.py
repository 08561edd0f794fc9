# Visualization modules
from .formatter import (
    format_score_line,
    score_line_text,
    calendar_label,
    time_label,
    print_score,
    create_standings_table,
    build_standings_tables,
    render_standings,
    build_leagues_table,
)
