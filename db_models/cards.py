from datetime import datetime

from db_models.databases import db

CARD_HEADINGS = (
    'Total Revenue',
    'New Customers',
    'Active Accounts',
    'Growth Rate',
)
MAX_CARDS = len(CARD_HEADINGS)


def compute_change_percent(current_value, previous_value):
    """Percentage change from previous to current; 0 when there is no baseline."""
    if not previous_value:
        return 0.0
    return (float(current_value or 0) - float(previous_value)) / float(previous_value) * 100


class Card(db.Model):
    __tablename__ = 'cards'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    heading = db.Column(db.String(60), unique=True, nullable=False)
    current_value = db.Column(db.Float, nullable=False, default=0)
    previous_value = db.Column(db.Float, nullable=False, default=0)
    change_percent = db.Column(db.Float, nullable=False, default=0)
    description = db.Column(db.String(255), nullable=True)
    note = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def apply_values(self, current_value, previous_value, description=None, note=None):
        self.current_value = float(current_value or 0)
        self.previous_value = float(previous_value or 0)
        self.change_percent = compute_change_percent(self.current_value, self.previous_value)
        self.description = description or None
        self.note = note or None

    def to_dict(self):
        return {
            'id': self.id,
            'heading': self.heading,
            'currentValue': self.current_value,
            'previousValue': self.previous_value,
            'changePercent': self.change_percent,
            'description': self.description,
            'note': self.note,
        }
