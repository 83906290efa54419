from sqlalchemy import (
    Column, Integer, String, Date, Numeric, ForeignKey, CheckConstraint
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

class Player(Base):
    __tablename__ = 'players'
    
    player_no = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(50), nullable=False)
    town = Column(String(50), nullable=False, index=True)
    sex = Column(String(1), nullable=False)  # 'M' or 'F'
    year_of_birth = Column(Integer, nullable=False)
    
    # Relationships
    # Loaded with selectin; grouped queries must not gain eager-load joins
    penalties = relationship("Penalty", back_populates="player", lazy="selectin")
    
    __table_args__ = (
        CheckConstraint("sex IN ('M', 'F')", name='ck_players_sex'),
    )
    
    @property
    def is_female(self) -> bool:
        return self.sex == 'F'
    
    def __repr__(self):
        return f"<Player(player_no={self.player_no}, name='{self.name}', town='{self.town}')>"

class Penalty(Base):
    __tablename__ = 'penalties'
    
    payment_no = Column(Integer, primary_key=True, autoincrement=False)
    player_no = Column(Integer, ForeignKey('players.player_no'), nullable=False, index=True)
    pen_date = Column(Date, nullable=False)
    amount = Column(Numeric(7, 2), nullable=False)
    
    # Relationships
    player = relationship("Player", back_populates="penalties", lazy="selectin")
    
    __table_args__ = (
        CheckConstraint('amount >= 0', name='ck_penalties_amount_non_negative'),
    )
    
    def __repr__(self):
        return f"<Penalty(payment_no={self.payment_no}, player_no={self.player_no}, amount={self.amount})>"
