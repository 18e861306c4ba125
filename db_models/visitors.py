from db_models.databases import db


class Visitor(db.Model):
    __tablename__ = 'visitors'

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, unique=True, nullable=False, index=True)
    desktop = db.Column(db.Integer, nullable=False, default=0)
    mobile = db.Column(db.Integer, nullable=False, default=0)

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.isoformat(),
            'desktop': self.desktop,
            'mobile': self.mobile,
        }
