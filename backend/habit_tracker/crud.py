from datetime import date
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from . import models
from .errors import StorageError


def get_user(db: Session, user_id: int):
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_username(db: Session, username: str):
    return db.query(models.User).filter(models.User.username == username).first()


def get_user_by_email(db: Session, email: str):
    return db.query(models.User).filter(models.User.email == email).first()


def get_users(db: Session):
    return db.query(models.User).order_by(models.User.id).all()


def create_user(
        db: Session,
        email: str,
        hashed_password: str,
        username: str,
        firstname: str,
        lastname: str
):
    db_user = models.User(
        email=email,
        password=hashed_password,
        username=username,
        firstname=firstname,
        lastname=lastname,
        token_count=0
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise StorageError(str(e.orig)) from e
    db.refresh(db_user)
    return db_user


def update_user(
        db: Session,
        user: models.User,
        firstname: str = None,
        lastname: str = None
):
    if not firstname and not lastname:
        return user

    if firstname:
        user.firstname = firstname
    if lastname:
        user.lastname = lastname

    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user: models.User):
    db.delete(user)
    db.commit()


def get_habit(db: Session, habit_id: int):
    return db.query(models.Habit).filter(models.Habit.id == habit_id).first()


def get_owned_habit(db: Session, habit_id: int, username: str):
    return (
        db.query(models.Habit)
        .join(models.User)
        .filter(models.Habit.id == habit_id, models.User.username == username)
        .first()
    )


def get_habits(db: Session, user_id: int):
    return (
        db.query(models.Habit)
        .filter(models.Habit.user_id == user_id)
        .order_by(models.Habit.title)
        .all()
    )


def create_habit(
        db: Session,
        user_id: int,
        title: str,
        start_date: date,
        description: Optional[str] = None
):
    db_habit = models.Habit(
        user_id=user_id,
        title=title,
        description=description,
        start_date=start_date
    )
    db.add(db_habit)
    db.commit()
    db.refresh(db_habit)
    return db_habit


def update_habit(
        db: Session,
        habit: models.Habit,
        title: str = None,
        description: str = None,
        start_date: date = None
):
    if not title and not description and not start_date:
        return habit

    if title:
        habit.title = title
    if description:
        habit.description = description
    if start_date:
        habit.start_date = start_date

    db.commit()
    db.refresh(habit)
    return habit


def delete_habit(db: Session, habit: models.Habit):
    db.delete(habit)
    db.commit()


def get_entries(db: Session):
    return db.query(models.Entry).order_by(models.Entry.id).all()


def get_entries_for_habit(db: Session, habit_id: int):
    return (
        db.query(models.Entry)
        .filter(models.Entry.habit_id == habit_id)
        .order_by(models.Entry.year, models.Entry.month, models.Entry.day)
        .all()
    )


def get_entries_for_month(db: Session, habit_id: int, year: int, month: int):
    return (
        db.query(models.Entry)
        .filter(
            models.Entry.habit_id == habit_id,
            models.Entry.year == year,
            models.Entry.month == month
        )
        .order_by(models.Entry.day)
        .all()
    )


def find_entry(db: Session, habit_id: int, year: int, month: int, day: int):
    return db.query(models.Entry).filter(
        models.Entry.habit_id == habit_id,
        models.Entry.year == year,
        models.Entry.month == month,
        models.Entry.day == day
    ).first()


def create_entry(db: Session, habit_id: int, year: int, month: int, day: int):
    db_entry = models.Entry(habit_id=habit_id, year=year, month=month, day=day)
    db.add(db_entry)
    db.commit()
    db.refresh(db_entry)
    return db_entry


def delete_entry(db: Session, entry: models.Entry):
    db.delete(entry)
    db.commit()
