"""StudyHub backend: the academic aggregation engine behind the student dashboard."""
