"""Modèle Pays / Country model."""

from sqlalchemy import BigInteger, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from country_directory.database import Base


class Country(Base):
    __tablename__ = "countries"

    # Cle technique : ordre d'insertion / Surrogate key: insertion order
    pk: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    id_country: Mapped[int] = mapped_column(BigInteger, unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    capital: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (Index("ix_countries_name", "name"),)

    def __repr__(self) -> str:
        return f"<Country {self.id_country} - {self.name}>"
