"""Team Scheduler: weekly schedules and availability for a small team."""
