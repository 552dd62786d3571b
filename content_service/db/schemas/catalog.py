from pydantic import BaseModel, ConfigDict


class CatalogItem(BaseModel):
    id: int
    name: str
    image: str
    model_config = ConfigDict(from_attributes=True)


class DescribedCatalogItem(CatalogItem):
    description: str = ""


class Author(CatalogItem):
    pass


class Poet(CatalogItem):
    pass


class Article(DescribedCatalogItem):
    pass


class Course(DescribedCatalogItem):
    pass


class Feed(DescribedCatalogItem):
    pass
