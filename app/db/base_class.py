# Fichier: app/db/base_class.py
from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """
    Base déclarative commune aux tables grammaire, examens et kanji.
    ``app.db.base`` importe tous les modèles pour que ``create_all`` les voie.
    """
