from conecta import db
from datetime import datetime
import math

PAYMENT_REQUIRED_CONNECTION_NUMBER = 3

STATUSES = ('pending', 'accepted', 'in_progress', 'completed', 'cancelled')
TERMINAL_STATUSES = ('completed', 'cancelled')

# Targets each role may request
ROLE_TRANSITIONS = {
    'professional': ('accepted', 'in_progress', 'completed'),
    'client': ('cancelled', 'completed')
}

# Forward order of the main path; cancelling is allowed from any open status
STATUS_ORDER = {'pending': 0, 'accepted': 1, 'in_progress': 2, 'completed': 3}

class Connection(db.Model):
    __tablename__ = 'connections'

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    professional_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    connection_number = db.Column(db.Integer, nullable=False)

    # Commission
    payment_required = db.Column(db.Boolean, default=False)
    payment_completed = db.Column(db.Boolean, default=False)
    commission_amount = db.Column(db.Numeric(10, 2), nullable=False)
    payment_info = db.Column(db.JSON, nullable=True)

    status = db.Column(db.String(20), default='pending', index=True)  # pending, accepted, in_progress, completed, cancelled

    # Job details
    description = db.Column(db.Text, nullable=False)
    job_started_at = db.Column(db.DateTime, nullable=True)
    job_finished_at = db.Column(db.DateTime, nullable=True)
    location = db.Column(db.JSON, nullable=True)
    budget_estimate = db.Column(db.JSON, nullable=True)
    is_urgent = db.Column(db.Boolean, default=False)

    messages = db.Column(db.JSON, default=list)
    rating_pending = db.Column(db.Boolean, default=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    client = db.relationship('Client', foreign_keys=[client_id], back_populates='connections')
    professional = db.relationship('Professional', foreign_keys=[professional_id], back_populates='connections')
    review = db.relationship('Review', back_populates='connection', uselist=False, cascade='all, delete-orphan')

    __table_args__ = (
        db.UniqueConstraint('client_id', 'professional_id', 'connection_number', name='unique_pair_connection_number'),
        db.CheckConstraint('connection_number >= 1', name='connection_number_positive'),
        db.Index('ix_connections_pair', 'client_id', 'professional_id'),
        db.Index('ix_connections_professional_status', 'professional_id', 'status'),
    )

    @staticmethod
    def requires_payment(connection_number):
        return connection_number == PAYMENT_REQUIRED_CONNECTION_NUMBER

    @classmethod
    def next_connection_number(cls, client_id, professional_id):
        """1-based ordinal of the next connection for this client/professional pair"""
        return cls.query.filter_by(client_id=client_id, professional_id=professional_id).count() + 1

    @property
    def is_terminal(self):
        return self.status in TERMINAL_STATUSES

    @property
    def payment_due(self):
        return bool(self.payment_required and not self.payment_completed)

    def job_duration_days(self):
        if self.job_started_at and self.job_finished_at:
            seconds = (self.job_finished_at - self.job_started_at).total_seconds()
            return math.ceil(seconds / 86400)
        return None

    def add_message(self, sender_id, text):
        message = {
            'sender_id': sender_id,
            'message': text,
            'timestamp': datetime.utcnow().isoformat(),
            'read': False
        }
        # Reassign a new list so the JSON column is flagged dirty
        self.messages = list(self.messages or []) + [message]
        return message

    def mark_messages_read(self, reader_id):
        """Flip the read flag on every message the reader did not send"""
        changed = 0
        updated = []
        for message in self.messages or []:
            message = dict(message)
            if message['sender_id'] != reader_id and not message.get('read'):
                message['read'] = True
                changed += 1
            updated.append(message)
        if changed:
            self.messages = updated
        return changed

    def unread_count(self, reader_id):
        return sum(1 for m in self.messages or [] if m['sender_id'] != reader_id and not m.get('read'))

    def complete(self):
        self.status = 'completed'
        if not self.job_finished_at:
            self.job_finished_at = datetime.utcnow()
        self.rating_pending = True

    def to_dict(self, viewer_id=None, include_messages=False, include_participants=False):
        data = {
            'id': self.id,
            'client_id': self.client_id,
            'professional_id': self.professional_id,
            'connection_number': self.connection_number,
            'status': self.status,
            'description': self.description,
            'is_urgent': self.is_urgent,
            'location': self.location or {},
            'budget_estimate': self.budget_estimate or {},
            'payment': {
                'required': self.payment_required,
                'completed': self.payment_completed,
                'amount': float(self.commission_amount),
                'info': self.payment_info or {}
            },
            'payment_due': self.payment_due,
            'job_started_at': self.job_started_at.isoformat() if self.job_started_at else None,
            'job_finished_at': self.job_finished_at.isoformat() if self.job_finished_at else None,
            'job_duration_days': self.job_duration_days(),
            'rating_pending': self.rating_pending,
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat()
        }

        if viewer_id is not None:
            data['unread_messages'] = self.unread_count(viewer_id)

        if include_messages:
            data['messages'] = self.messages or []

        if include_participants:
            data['client'] = self.client.summary() if self.client else None
            data['professional'] = self.professional.summary() if self.professional else None

        return data

    def __repr__(self):
        return f'<Connection {self.id} #{self.connection_number} {self.status}>'
