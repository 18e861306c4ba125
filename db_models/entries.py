import uuid
from datetime import datetime

from db_models.databases import db

STATUS_IN_PROCESS = 'In Process'
STATUS_DONE = 'Done'
ENTRY_STATUSES = (STATUS_IN_PROCESS, STATUS_DONE)


def _new_entry_id():
    return str(uuid.uuid4())


class TableEntry(db.Model):
    __tablename__ = 'table_entries'

    id = db.Column(db.String(36), primary_key=True, default=_new_entry_id)
    header = db.Column(db.String(255), nullable=False)
    type = db.Column(db.String(120), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=STATUS_IN_PROCESS)
    target = db.Column(db.Integer, nullable=False, default=0)
    limit = db.Column(db.Integer, nullable=False, default=0)
    reviewer = db.Column(db.String(120), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'header': self.header,
            'type': self.type,
            'status': self.status,
            'target': self.target,
            'limit': self.limit,
            'reviewer': self.reviewer,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
