"""
Scheduling core.

- Time-zone conversion (timezones.py)
- Working-window checks (working_hours.py)
- Hourly slot generation (slots.py)
- Ranking (ranking.py)
- Meeting descriptions and calendar links (events.py)
"""
