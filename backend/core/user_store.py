"""Read and write access to the ``users`` table."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.models.user import User


def find_user_by_name(db: Session, name: str) -> User | None:
    return db.query(User).filter(User.name == name).first()


def find_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(
    db: Session,
    name: str,
    email: str,
    password_hash: str,
    profile_picture: str | None,
) -> User:
    """Insert a new user.

    Raises ``IntegrityError`` when a concurrent signup claimed the name or
    email after the caller's existence checks. The session is rolled back
    before the error propagates.
    """
    user = User(
        name=name,
        email=email,
        password=password_hash,
        profile_picture=profile_picture,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(user)
    return user


def update_password(db: Session, email: str, password_hash: str) -> int:
    """Replace the stored hash for ``email`` and return the number of rows changed."""
    rows_affected = (
        db.query(User)
        .filter(User.email == email)
        .update({User.password: password_hash}, synchronize_session=False)
    )
    db.commit()
    return rows_affected
