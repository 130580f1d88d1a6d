"""
Data Management Module - Repositories for portfolio content
Each repository owns persistence and validation for one resource type and
returns plain dicts shaped for the JSON API.
"""

from flask import current_app
from extensions import db
from models import Profile, Skill, Project, Experience, Certificate
from .errors import NotFound
from .validation import Field, validate_fields, SOCIAL_LINK_KEYS


PROFILE_FIELDS = (
    Field('name', required=True),
    Field('title', required=True),
    Field('description', required=True),
    Field('email', required=True),
    Field('phone'),
    Field('location'),
    Field('profileImage', attr='profile_image', label='Profile image'),
    Field('socialLinks', attr='social_links', kind='social_links', default=dict, label='Social links'),
)

SKILL_FIELDS = (
    Field('name', required=True),
    Field('percentage', kind='number', required=True, minimum=0, maximum=100),
    Field('category', required=True),
    Field('icon'),
)

# Range of a 32-bit INTEGER column
ORDER_MIN = -2**31
ORDER_MAX = 2**31 - 1

PROJECT_FIELDS = (
    Field('title', required=True),
    Field('description', required=True),
    Field('technologies', kind='string_list', default=list),
    Field('features', kind='string_list', default=list),
    Field('category'),
    Field('icon'),
    Field('gradient'),
    Field('projectUrl', attr='project_url', label='Project URL'),
    Field('githubUrl', attr='github_url', label='GitHub URL'),
    Field('order', attr='display_order', kind='integer', default=0,
          minimum=ORDER_MIN, maximum=ORDER_MAX),
)

EXPERIENCE_TYPES = ('experience', 'education')

EXPERIENCE_FIELDS = (
    Field('title', required=True),
    Field('company', required=True),
    Field('location'),
    Field('startDate', attr='start_date', required=True, label='Start date'),
    Field('endDate', attr='end_date', label='End date'),
    Field('current', kind='boolean', default=False),
    Field('description', kind='string_list', default=list),
    Field('type', attr='entry_type', required=True, choices=EXPERIENCE_TYPES,
          choices_message='Type must be either "experience" or "education"'),
)

CERTIFICATE_FIELDS = (
    Field('title', required=True),
    Field('issuer', required=True),
    Field('date', attr='issued_date'),
    Field('icon'),
    Field('url', label='URL'),
)


def _timestamp(value):
    return value.isoformat() if value else None


def record_to_dict(record, rules):
    """Convert a model instance to its wire representation"""
    result = {'id': record.id}
    for field in rules:
        value = getattr(record, field.attr)
        if field.kind == 'number' and isinstance(value, float) and value.is_integer():
            value = int(value)
        elif field.kind == 'string_list':
            value = list(value or [])
        elif field.kind == 'social_links':
            value = {key: (value or {}).get(key, '') for key in SOCIAL_LINK_KEYS}
        elif field.kind == 'boolean':
            value = bool(value)
        result[field.name] = value
    result['createdAt'] = _timestamp(record.created_at)
    result['updatedAt'] = _timestamp(record.updated_at)
    return result


class Repository:
    """CRUD store for one collection resource"""

    model = None
    rules = ()
    entity_name = 'Record'

    def ordering(self):
        return ()

    def to_dict(self, record):
        return record_to_dict(record, self.rules)

    def list(self):
        records = self.model.query.order_by(*self.ordering()).all()
        return [self.to_dict(record) for record in records]

    def get(self, record_id):
        record = db.session.get(self.model, record_id) if record_id else None
        if record is None:
            raise NotFound(f'{self.entity_name} not found')
        return record

    def create(self, fields):
        values = validate_fields(self.rules, fields)
        record = self.model(**values)
        db.session.add(record)
        db.session.commit()
        current_app.logger.info(f"Created {self.entity_name.lower()} {record.id}")
        return self.to_dict(record)

    def update(self, record_id, fields):
        values = validate_fields(self.rules, fields, partial=True)
        record = self.get(record_id)
        for attr, value in values.items():
            setattr(record, attr, value)
        db.session.commit()
        current_app.logger.info(f"Updated {self.entity_name.lower()} {record.id}")
        return self.to_dict(record)

    def delete(self, record_id):
        record = self.get(record_id)
        db.session.delete(record)
        db.session.commit()
        current_app.logger.info(f"Deleted {self.entity_name.lower()} {record_id}")
        return {'message': f'{self.entity_name} deleted successfully'}

    def clear(self):
        count = self.model.query.delete()
        db.session.commit()
        return count


class SkillRepository(Repository):
    model = Skill
    rules = SKILL_FIELDS
    entity_name = 'Skill'

    def ordering(self):
        return (Skill.category.asc(), Skill.name.asc())


class ProjectRepository(Repository):
    model = Project
    rules = PROJECT_FIELDS
    entity_name = 'Project'

    def ordering(self):
        # Newest first among projects sharing an order value
        return (Project.display_order.asc(), Project.created_at.desc(), Project.id.desc())


class ExperienceRepository(Repository):
    model = Experience
    rules = EXPERIENCE_FIELDS
    entity_name = 'Experience'

    def ordering(self):
        return (Experience.start_date.desc(), Experience.created_at.desc())


class CertificateRepository(Repository):
    model = Certificate
    rules = CERTIFICATE_FIELDS
    entity_name = 'Certificate'

    def ordering(self):
        return (Certificate.issued_date.desc().nulls_last(), Certificate.created_at.desc())


def get_default_profile_data():
    """Return the profile created on first read"""
    return {
        'name': 'Your Name',
        'title': 'Full Stack Developer',
        'description': 'Software engineer building web and mobile applications. '
                       'Update this profile from the admin panel.',
        'email': 'hello@example.com',
        'phone': '+00 000 0000000',
        'location': 'Earth',
        'profileImage': '',
        'socialLinks': {
            'linkedin': 'https://www.linkedin.com/',
            'github': 'https://github.com/',
            'instagram': 'https://www.instagram.com/'
        }
    }


class ProfileRepository:
    """Singleton store for the portfolio profile"""

    rules = PROFILE_FIELDS

    def to_dict(self, profile):
        return record_to_dict(profile, self.rules)

    def get_or_create_default(self):
        profile = Profile.query.first()
        if profile is None:
            values = validate_fields(self.rules, get_default_profile_data())
            profile = Profile(**values)
            db.session.add(profile)
            db.session.commit()
            current_app.logger.info("✓ Default profile created")
        return self.to_dict(profile)

    def validate(self, fields):
        """Validate an update; the four required fields must be supplied, others are optional"""
        payload = dict(fields) if isinstance(fields, dict) else fields
        if isinstance(payload, dict):
            for field in self.rules:
                if field.required:
                    payload.setdefault(field.name, None)
        return validate_fields(self.rules, payload, partial=True)

    def upsert(self, fields):
        """Create or update the profile"""
        values = self.validate(fields)

        profile = Profile.query.first()
        if profile is None:
            profile = Profile(**values)
            db.session.add(profile)
        else:
            for attr, value in values.items():
                setattr(profile, attr, value)
        db.session.commit()
        current_app.logger.info(f"Profile {profile.id} saved")
        return self.to_dict(profile)


profiles = ProfileRepository()
skills = SkillRepository()
projects = ProjectRepository()
experience = ExperienceRepository()
certificates = CertificateRepository()

# URL segment -> repository, used by the content blueprint and importer
COLLECTIONS = {
    'skills': skills,
    'projects': projects,
    'experience': experience,
    'certificates': certificates,
}


__all__ = [
    'Repository',
    'ProfileRepository',
    'SkillRepository',
    'ProjectRepository',
    'ExperienceRepository',
    'CertificateRepository',
    'get_default_profile_data',
    'record_to_dict',
    'profiles',
    'skills',
    'projects',
    'experience',
    'certificates',
    'COLLECTIONS'
]
