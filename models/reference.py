from pydantic import BaseModel, Field


class City(BaseModel):
    id: int
    name: str
    province: str
    population: str = ""
    slug: str


class Keyword(BaseModel):
    id: int
    name: str
    slug: str


class Province(BaseModel):
    name: str
    slug: str
    cities: list[City] = Field(default_factory=list)


class ReferenceData(BaseModel):
    """Cities and keywords loaded once at startup from the CSV files."""

    cities: list[City] = Field(default_factory=list)
    keywords: list[Keyword] = Field(default_factory=list)

    def find_city(self, slug: str) -> City | None:
        return next((city for city in self.cities if city.slug == slug), None)

    def find_keyword(self, slug: str) -> Keyword | None:
        return next((keyword for keyword in self.keywords if keyword.slug == slug), None)
