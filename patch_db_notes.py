"""One-off repair: rewrite legacy nested note payloads as plain text."""

import logging

from backend.app.db.session import SessionLocal
from backend.app.services.notes import flatten_legacy_notes

logging.basicConfig(level=logging.INFO)

db = SessionLocal()
try:
    fixed = flatten_legacy_notes(db)
    print(f"Flattened {fixed} note(s).")
finally:
    db.close()
print("Done.")
