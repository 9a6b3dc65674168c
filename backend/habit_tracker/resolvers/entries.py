from typing import List
from strawberry.types import Info
from .. import crud, schemas
from ..graphql_types import Entry, EntriesForMonthInput, ToggleEntryInput, ToggleEntryPayload, ToggleState
from ..guards import authenticated, habit_owner, use_guards


def entries(info: Info) -> List[Entry]:
    return [Entry.from_model(e) for e in crud.get_entries(info.context.db)]


@schemas.validated(schemas.EntriesForMonthIn)
@use_guards(authenticated, habit_owner)
def entries_for_month(info: Info, data: EntriesForMonthInput) -> List[Entry]:
    found = crud.get_entries_for_month(
        info.context.db,
        habit_id=int(data.habit_id),
        year=data.year,
        month=data.month,
    )
    return [Entry.from_model(e) for e in found]


@schemas.validated(schemas.ToggleEntryIn)
@use_guards(authenticated, habit_owner)
def toggle_entry(info: Info, data: ToggleEntryInput) -> ToggleEntryPayload:
    db = info.context.db
    habit_id = int(data.habit_id)

    existing = crud.find_entry(db, habit_id=habit_id, year=data.year, month=data.month, day=data.day)
    if existing is None:
        created = crud.create_entry(db, habit_id=habit_id, year=data.year, month=data.month, day=data.day)
        return ToggleEntryPayload(entry=Entry.from_model(created), toggle_state=ToggleState.ADDED)

    removed = Entry.from_model(existing)
    crud.delete_entry(db, existing)
    return ToggleEntryPayload(entry=removed, toggle_state=ToggleState.REMOVED)
