"""
Configuration de la base de donnees pour Pointeuse.

Ce module fournit :
- Creation de l'engine (SQLite fichier, SQLite memoire, PostgreSQL)
- Session factory sous forme de generateur
- Fonction d'initialisation des tables

La base de donnees est configuree via POINTEUSE_DATABASE_URL (defaut: sqlite:///pointeuse.db).
"""

from collections.abc import Generator
from pathlib import Path

from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Cree l'engine SQLAlchemy correspondant a l'URL.

    Pour SQLite :
    - le repertoire parent du fichier est cree si necessaire
    - une base en memoire partage une connexion unique (StaticPool),
      sinon chaque session verrait une base vide
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo, pool_pre_ping=True)

    connect_args = {"check_same_thread": False}
    if database_url in _MEMORY_URLS:
        return create_engine(
            "sqlite://",
            echo=echo,
            connect_args=connect_args,
            poolclass=StaticPool,
        )

    db_path = Path(database_url.replace("sqlite:///", ""))
    db_path.parent.mkdir(exist_ok=True, parents=True)
    return create_engine(database_url, echo=echo, connect_args=connect_args)


def get_session(engine: Engine) -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation comme dependance FastAPI ou avec next() :
        session = next(get_session(engine))

    Yields:
        Session SQLModel connectee a l'engine, fermee en sortie
    """
    with Session(engine) as session:
        yield session


def init_db(engine: Engine) -> Engine:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables et index absents.

    Retourne l'engine pour pouvoir servir de Resource au container DI.
    """
    from pointeuse.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    return engine
