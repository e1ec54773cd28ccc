from conecta import db
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from werkzeug.security import generate_password_hash, check_password_hash
from flask_jwt_extended import create_access_token, create_refresh_token

STAR_VALUES = (5, 4, 3, 2, 1)

def empty_distribution():
    return {str(star): 0 for star in STAR_VALUES}

def summarize_scores(scores):
    """Build (average, total, distribution) for a list of 1-5 scores.

    The average is rounded half-up to one decimal, so [5, 5, 4, 3] gives 4.3.
    """
    distribution = empty_distribution()
    for score in scores:
        distribution[str(score)] += 1

    total = sum(distribution.values())
    if total == 0:
        return 0.0, 0, distribution

    weighted = sum(int(star) * count for star, count in distribution.items())
    average = (Decimal(weighted) / Decimal(total)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
    return float(average), total, distribution

class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    role = db.Column(db.String(20), nullable=False, index=True)  # client, professional
    name = db.Column(db.String(100), nullable=True)
    phone = db.Column(db.String(20), nullable=True)
    photo_url = db.Column(db.String(255), nullable=True)
    bio = db.Column(db.Text, nullable=True)
    zone = db.Column(db.String(100), nullable=True, index=True)
    email_verified = db.Column(db.Boolean, default=False)
    profile_complete = db.Column(db.Boolean, default=False)
    is_active = db.Column(db.Boolean, default=True)
    settings = db.Column(db.JSON, nullable=True)
    last_login_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __mapper_args__ = {'polymorphic_on': role}

    @property
    def is_client(self):
        return self.role == 'client'

    @property
    def is_professional(self):
        return self.role == 'professional'

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def generate_tokens(self):
        # JWT subjects must be strings
        access_token = create_access_token(identity=str(self.id))
        refresh_token = create_refresh_token(identity=str(self.id))
        return access_token, refresh_token

    def touch_last_login(self):
        self.last_login_at = datetime.utcnow()

    def has_complete_profile(self):
        return bool(self.name and self.phone and self.zone)

    def refresh_profile_complete(self):
        self.profile_complete = self.has_complete_profile()
        return self.profile_complete

    def summary(self):
        """Public card used when embedding a user in another resource"""
        return {
            'id': self.id,
            'name': self.name,
            'zone': self.zone,
            'photo_url': self.photo_url
        }

    def to_dict(self, include_private=False):
        data = {
            'id': self.id,
            'email': self.email,
            'role': self.role,
            'name': self.name,
            'phone': self.phone,
            'photo_url': self.photo_url,
            'bio': self.bio,
            'zone': self.zone,
            'email_verified': self.email_verified,
            'profile_complete': self.profile_complete,
            'is_active': self.is_active,
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat()
        }

        if include_private:
            data.update({
                'settings': self.settings or {},
                'last_login_at': self.last_login_at.isoformat() if self.last_login_at else None
            })

        return data

    def __repr__(self):
        return f'<User {self.email} ({self.role})>'

class Client(User):
    __mapper_args__ = {'polymorphic_identity': 'client'}

    connections = db.relationship('Connection', foreign_keys='Connection.client_id', back_populates='client',
                                  lazy=True, cascade='all, delete-orphan')
    reviews_written = db.relationship('Review', foreign_keys='Review.client_id', back_populates='client',
                                      lazy=True, cascade='all, delete-orphan')

class Professional(User):
    __mapper_args__ = {'polymorphic_identity': 'professional'}

    trades = db.Column(db.JSON, default=list)
    is_available = db.Column(db.Boolean, default=True)
    is_verified = db.Column(db.Boolean, default=False)
    rating_average = db.Column(db.Float, default=0.0)
    rating_count = db.Column(db.Integer, default=0)
    rating_distribution = db.Column(db.JSON, default=empty_distribution)

    connections = db.relationship('Connection', foreign_keys='Connection.professional_id',
                                  back_populates='professional', lazy=True, cascade='all, delete-orphan')
    reviews_received = db.relationship('Review', foreign_keys='Review.professional_id',
                                       back_populates='professional', lazy=True, cascade='all, delete-orphan')

    def has_complete_profile(self):
        return super().has_complete_profile() and bool(self.trades)

    def apply_rating_summary(self, scores):
        """Overwrite the aggregate rating fields from the given verified scores"""
        self.rating_average, self.rating_count, self.rating_distribution = summarize_scores(scores)

    def rating_summary(self):
        return {
            'average': self.rating_average or 0.0,
            'total': self.rating_count or 0,
            'distribution': self.rating_distribution or empty_distribution()
        }

    def summary(self):
        data = super().summary()
        data['trades'] = self.trades or []
        return data

    def to_dict(self, include_private=False):
        data = super().to_dict(include_private=include_private)
        data.update({
            'trades': self.trades or [],
            'is_available': self.is_available,
            'is_verified': self.is_verified,
            'rating': self.rating_summary()
        })
        return data

ROLE_MODELS = {
    'client': Client,
    'professional': Professional
}
