from faculty_portal.core.config import get_settings
from faculty_portal.db.bootstrap import find_schema_gaps
from faculty_portal.db.session import SessionLocal
from faculty_portal.services.conflict_service import find_conflicts
from faculty_portal.services.occurrences import expand_and_sort
from faculty_portal.services.template_store import COLLECTIONS, TemplateStore

settings = get_settings()

db = SessionLocal()
try:
    missing_tables, missing_columns = find_schema_gaps()
    for table in missing_tables:
        print(f"Missing table: {table}")
    for table, columns in missing_columns.items():
        print(f"Missing columns in {table}: {', '.join(columns)}")
    if not missing_tables and not missing_columns:
        store = TemplateStore(db)
        for path in COLLECTIONS:
            print(f"{path}: {len(store.get_all(path))}")

        occurrences = expand_and_sort(store.lecture_templates(), None, settings.dashboard_window_days)
        conflicts = find_conflicts(occurrences)
        print(f"Occurrences in the next {settings.dashboard_window_days + 1} days: {len(occurrences)}")
        print(f"Conflicts: {len(conflicts)}")
        for record in conflicts[:5]:
            print(f"  - {record.first.date_str} {record.first.time}: {record.description}")
finally:
    db.close()
