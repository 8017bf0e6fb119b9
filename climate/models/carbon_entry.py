"""
Modello CarbonEntry (tabella: carbon_entries).

Una registrazione dell'impronta di carbonio di un utente: categoria,
quantità grezza (km, kg, kWh) ed emissioni derivate.
Le emissioni non sono mai modificabili direttamente: vengono sempre
ricalcolate da (category, value) tramite set_measure().
"""

from datetime import date, datetime

from climate.extensions import db

# kg CO2 per unità
CARBON_EMISSION_FACTORS = {
    "transport": 0.2,  # per km
    "food": 1.5,       # per kg di cibo
    "energy": 0.5,     # per kWh
}


def calculate_emissions(category: str, value: float) -> float:
    """Emissioni derivate; le categorie sconosciute valgono il dato grezzo."""
    factor = CARBON_EMISSION_FACTORS.get(category)
    if factor is None:
        return float(value)
    return float(value) * factor


class CarbonEntry(db.Model):
    __tablename__ = "carbon_entries"

    id = db.Column(db.Integer, primary_key=True)

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    category = db.Column(db.String(64), nullable=False, index=True)
    value = db.Column(db.Float, nullable=False)
    calculated_emissions = db.Column(db.Float, nullable=False)
    date = db.Column(db.Date, nullable=False, default=date.today, index=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship("User", back_populates="carbon_entries")

    def set_measure(self, category: str, value: float) -> None:
        self.category = category
        self.value = float(value)
        self.calculated_emissions = calculate_emissions(category, value)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "category": self.category,
            "value": self.value,
            "calculated_emissions": self.calculated_emissions,
            "date": self.date.isoformat() if self.date else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return (
            f"<CarbonEntry id={self.id} user_id={self.user_id} "
            f"category={self.category!r} emissions={self.calculated_emissions}>"
        )
