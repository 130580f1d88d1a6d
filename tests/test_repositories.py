import pytest

from models import Profile
from utils.data import certificates, experience, get_default_profile_data, profiles, projects, skills
from utils.errors import NotFound, ValidationError


class TestSkillRepository:
    def test_create_and_list_sorted_by_category_then_name(self, app_ctx):
        skills.create({'name': 'React', 'percentage': 90, 'category': 'Frontend'})
        skills.create({'name': 'Node.js', 'percentage': 88, 'category': 'Backend'})
        skills.create({'name': 'Django', 'percentage': 70, 'category': 'Backend'})

        listed = [(s['category'], s['name']) for s in skills.list()]
        assert listed == [('Backend', 'Django'), ('Backend', 'Node.js'), ('Frontend', 'React')]

    def test_percentage_serialized_as_number(self, app_ctx):
        created = skills.create({'name': 'Go', 'percentage': 75, 'category': 'Backend'})
        assert created['percentage'] == 75
        assert created['id']
        assert created['createdAt']

    def test_out_of_range_rejected_on_create_and_update(self, app_ctx):
        with pytest.raises(ValidationError):
            skills.create({'name': 'Go', 'percentage': 101, 'category': 'Backend'})

        created = skills.create({'name': 'Go', 'percentage': 50, 'category': 'Backend'})
        with pytest.raises(ValidationError):
            skills.update(created['id'], {'percentage': -5})
        assert skills.list()[0]['percentage'] == 50

    def test_partial_update(self, app_ctx):
        created = skills.create({'name': 'Go', 'percentage': 50, 'category': 'Backend'})
        updated = skills.update(created['id'], {'percentage': 65})
        assert updated['percentage'] == 65
        assert updated['name'] == 'Go'
        assert updated['id'] == created['id']

    def test_update_and_delete_unknown_id(self, app_ctx):
        with pytest.raises(NotFound) as exc:
            skills.update('does-not-exist', {'name': 'X'})
        assert exc.value.message == 'Skill not found'
        with pytest.raises(NotFound):
            skills.delete('does-not-exist')

    def test_delete(self, app_ctx):
        created = skills.create({'name': 'Go', 'percentage': 50, 'category': 'Backend'})
        assert skills.delete(created['id']) == {'message': 'Skill deleted successfully'}
        assert skills.list() == []


class TestProjectRepository:
    def test_arrays_round_trip_in_order(self, app_ctx):
        created = projects.create({
            'title': 'Code Assistant', 'description': 'AI helper',
            'technologies': ['A', 'B'], 'features': ['F1']
        })
        stored = projects.list()[0]
        assert stored['id'] == created['id']
        assert stored['technologies'] == ['A', 'B']
        assert stored['features'] == ['F1']
        assert stored['order'] == 0

    def test_ordering_by_order_then_newest(self, app_ctx):
        last = projects.create({'title': 'Last', 'description': 'x', 'order': 2})
        older = projects.create({'title': 'Older', 'description': 'x', 'order': 1})
        newer = projects.create({'title': 'Newer', 'description': 'x', 'order': 1})

        assert [p['id'] for p in projects.list()] == [newer['id'], older['id'], last['id']]

    def test_wire_names_for_urls(self, app_ctx):
        created = projects.create({
            'title': 'Site', 'description': 'x',
            'projectUrl': 'https://example.com', 'githubUrl': 'https://github.com/x/site'
        })
        assert created['projectUrl'] == 'https://example.com'
        assert created['githubUrl'] == 'https://github.com/x/site'


class TestExperienceRepository:
    def test_type_enforced(self, app_ctx):
        with pytest.raises(ValidationError):
            experience.create({'title': 'Intern', 'company': 'Acme', 'startDate': '2023-06', 'type': 'job'})

        created = experience.create({'title': 'Intern', 'company': 'Acme', 'startDate': '2023-06',
                                     'type': 'experience'})
        with pytest.raises(ValidationError):
            experience.update(created['id'], {'type': 'hobby'})

    def test_description_coerced_on_update(self, app_ctx):
        created = experience.create({'title': 'BS SE', 'company': 'FAST', 'startDate': '2021-09',
                                     'type': 'education', 'description': ['Coursework']})
        updated = experience.update(created['id'], {'description': 'Graduated'})
        assert updated['description'] == ['Graduated']

    def test_sorted_by_start_date_descending(self, app_ctx):
        experience.create({'title': 'A', 'company': 'X', 'startDate': '2021-06', 'type': 'experience'})
        experience.create({'title': 'B', 'company': 'Y', 'startDate': '2023-01', 'type': 'experience'})
        experience.create({'title': 'C', 'company': 'Z', 'startDate': '2022-03', 'type': 'education'})

        assert [e['title'] for e in experience.list()] == ['B', 'C', 'A']


class TestCertificateRepository:
    def test_sorted_by_date_descending_undated_last(self, app_ctx):
        certificates.create({'title': 'Undated', 'issuer': 'X'})
        certificates.create({'title': 'Old', 'issuer': 'X', 'date': '2022-01'})
        certificates.create({'title': 'New', 'issuer': 'X', 'date': '2024-05'})

        assert [c['title'] for c in certificates.list()] == ['New', 'Old', 'Undated']

    def test_required_fields(self, app_ctx):
        with pytest.raises(ValidationError) as exc:
            certificates.create({'title': 'AWS'})
        assert exc.value.message == 'Issuer is required'


class TestProfileRepository:
    def test_default_created_once_and_stable(self, app_ctx):
        first = profiles.get_or_create_default()
        second = profiles.get_or_create_default()
        assert first == second
        assert Profile.query.count() == 1

        defaults = get_default_profile_data()
        for key in ('name', 'title', 'description', 'email', 'phone', 'location'):
            assert first[key] == defaults[key]
        assert first['socialLinks'] == defaults['socialLinks']

    def test_upsert_creates_when_absent(self, app_ctx):
        saved = profiles.upsert({'name': 'Ada', 'title': 'Engineer', 'description': 'Hi',
                                 'email': 'ada@example.com'})
        assert saved['name'] == 'Ada'
        assert Profile.query.count() == 1

    def test_upsert_updates_in_place_and_keeps_untouched_fields(self, app_ctx):
        original = profiles.get_or_create_default()
        saved = profiles.upsert({'name': 'Ada', 'title': 'Engineer', 'description': 'Hi',
                                 'email': 'ada@example.com'})
        assert saved['id'] == original['id']
        assert saved['location'] == original['location']
        assert Profile.query.count() == 1

    def test_upsert_requires_core_fields(self, app_ctx):
        with pytest.raises(ValidationError) as exc:
            profiles.upsert({'name': 'Ada', 'title': 'Engineer', 'description': 'Hi'})
        assert exc.value.message == 'Email is required'
