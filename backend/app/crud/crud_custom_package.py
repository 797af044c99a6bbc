import logging
from typing import Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from ..models.custom_package import OptionCategory, PackageOption
from ..schemas.custom_package import PackageOptionCreate

logger = logging.getLogger(__name__)


def get_categories(db: Session) -> List[OptionCategory]:
    """Raw catalog read, sorted by name; no availability filtering."""
    return (
        db.query(OptionCategory)
        .options(selectinload(OptionCategory.options))
        .order_by(OptionCategory.name.asc())
        .all()
    )


def get_category(db: Session, category_id: int) -> Optional[OptionCategory]:
    return db.get(OptionCategory, category_id)


def get_category_by_name(db: Session, name: str) -> Optional[OptionCategory]:
    return db.query(OptionCategory).filter(OptionCategory.name == name).first()


def _append_options(
    db: Session, category: OptionCategory, options: Iterable[PackageOptionCreate]
) -> None:
    next_position = 0
    if category.id is not None:
        last = (
            db.query(func.max(PackageOption.position))
            .filter(PackageOption.category_id == category.id)
            .scalar()
        )
        next_position = 0 if last is None else last + 1
    for offset, option_in in enumerate(options):
        category.options.append(
            PackageOption(position=next_position + offset, **option_in.model_dump())
        )


def upsert_category_options(
    db: Session, name: str, options: List[PackageOptionCreate]
) -> OptionCategory:
    """Append ``options`` to the category called ``name``, creating it if needed.

    Options are never de-duplicated. A concurrent creation of the same
    category name is retried once as an append.
    """
    category = get_category_by_name(db, name)
    created = category is None
    if created:
        category = OptionCategory(name=name)
        db.add(category)
    _append_options(db, category, options)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if not created:
            raise
        logger.info("Category %r created concurrently; appending instead", name)
        category = get_category_by_name(db, name)
        if category is None:
            raise
        _append_options(db, category, options)
        db.commit()
    db.refresh(category)
    logger.info(
        "%s category %r with %d new option(s)",
        "Created" if created else "Extended",
        name,
        len(options),
    )
    return category


def delete_category(db: Session, category: OptionCategory) -> None:
    db.delete(category)
    db.commit()
