from collections.abc import Iterator

from sqlalchemy.orm import Session

from evento_api.db import session


def get_db() -> Iterator[Session]:
    # SessionLocal is looked up per call so tests can rebind it
    db = session.SessionLocal()
    try:
        yield db
    finally:
        db.close()
