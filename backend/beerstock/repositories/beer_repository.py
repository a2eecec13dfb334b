from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from beerstock.db.base import BeerModel
from beerstock.db.session import SessionLocal
from beerstock.domain.entities import Beer
from beerstock.domain.interfaces import IBeerRepository


class BeerRepository(IBeerRepository):
    """SQLAlchemy-backed beer repository. Commits after every write."""

    def __init__(self, db_session: Optional[Session] = None):
        self.db = db_session or SessionLocal()

    def find_by_name(self, name: str) -> Optional[Beer]:
        db_beer = self.db.execute(
            select(BeerModel).filter_by(name=name)
        ).scalar_one_or_none()
        return self._to_domain(db_beer) if db_beer else None

    def find_by_id(self, beer_id: int) -> Optional[Beer]:
        db_beer = self.db.get(BeerModel, beer_id)
        return self._to_domain(db_beer) if db_beer else None

    def find_all(self) -> List[Beer]:
        rows = self.db.execute(select(BeerModel).order_by(BeerModel.id.asc())).scalars()
        return [self._to_domain(row) for row in rows]

    def save(self, beer: Beer) -> Beer:
        db_beer = self.db.get(BeerModel, beer.id) if beer.id is not None else None
        if db_beer is None:
            db_beer = BeerModel(id=beer.id)
            self.db.add(db_beer)
        db_beer.name = beer.name
        db_beer.brand = beer.brand
        db_beer.max = beer.max
        db_beer.quantity = beer.quantity
        db_beer.type = beer.type
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(db_beer)
        return self._to_domain(db_beer)

    def delete_by_id(self, beer_id: int) -> None:
        db_beer = self.db.get(BeerModel, beer_id)
        if db_beer is None:
            return
        self.db.delete(db_beer)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _to_domain(self, db_beer: BeerModel) -> Beer:
        return Beer(
            id=db_beer.id,
            name=db_beer.name,
            brand=db_beer.brand,
            max=db_beer.max,
            quantity=db_beer.quantity,
            type=db_beer.type,
        )
