from conecta import db
from datetime import datetime

class Review(db.Model):
    __tablename__ = 'reviews'

    id = db.Column(db.Integer, primary_key=True)
    connection_id = db.Column(db.Integer, db.ForeignKey('connections.id'), nullable=False)
    client_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    professional_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False)  # 1-5 stars
    comment = db.Column(db.Text, nullable=False)
    would_recommend = db.Column(db.Boolean, nullable=True)
    positive_aspects = db.Column(db.JSON, default=list)
    improvement_aspects = db.Column(db.JSON, default=list)
    work_completed = db.Column(db.Boolean, default=True)
    is_verified = db.Column(db.Boolean, default=True, index=True)
    is_moderated = db.Column(db.Boolean, default=False)
    is_reported = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    connection = db.relationship('Connection', back_populates='review')
    client = db.relationship('Client', foreign_keys=[client_id], back_populates='reviews_written')
    professional = db.relationship('Professional', foreign_keys=[professional_id], back_populates='reviews_received')

    # Constraints
    __table_args__ = (
        db.CheckConstraint('score >= 1 AND score <= 5', name='score_range'),
        db.UniqueConstraint('connection_id', name='unique_connection_review'),
    )

    def age_in_days(self, now=None):
        """Whole days elapsed since the review was written"""
        now = now or datetime.utcnow()
        return (now - self.created_at).days

    def to_dict(self, include_client=False, include_professional=False, include_connection=False):
        data = {
            'id': self.id,
            'connection_id': self.connection_id,
            'client_id': self.client_id,
            'professional_id': self.professional_id,
            'score': self.score,
            'comment': self.comment,
            'would_recommend': self.would_recommend,
            'positive_aspects': self.positive_aspects or [],
            'improvement_aspects': self.improvement_aspects or [],
            'work_completed': self.work_completed,
            'is_verified': self.is_verified,
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat()
        }

        if include_client:
            data['client'] = {
                'id': self.client.id,
                'name': self.client.name or 'Verified client'
            } if self.client else None

        if include_professional and self.professional:
            data['professional'] = self.professional.summary()

        if include_connection and self.connection:
            data['connection'] = {
                'id': self.connection.id,
                'description': self.connection.description,
                'created_at': self.connection.created_at.isoformat()
            }

        return data

    def __repr__(self):
        return f'<Review {self.id} - {self.score} stars>'
