"""
Base database model
"""
from sqlalchemy.orm import declarative_base

# Create base class
Base = declarative_base()
