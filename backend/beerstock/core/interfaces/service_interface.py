from typing import List

from beerstock.schemas.dtos import BeerDTO


class BeerServiceInterface:
    def create_beer(self, beer_dto: BeerDTO) -> BeerDTO:
        raise NotImplementedError

    def find_by_name(self, name: str) -> BeerDTO:
        raise NotImplementedError

    def list_all(self) -> List[BeerDTO]:
        raise NotImplementedError

    def delete_by_id(self, beer_id: int) -> None:
        raise NotImplementedError

    def increment(self, beer_id: int, quantity_to_increment: int) -> BeerDTO:
        raise NotImplementedError

    def decrement(self, beer_id: int, quantity_to_decrement: int) -> BeerDTO:
        raise NotImplementedError
