import json

from migrations.import_portfolio_json import import_portfolio, main
from utils.data import certificates, experience, profiles, projects, skills

DOCUMENT = {
    'profile': {
        'name': 'M. Ahtisham', 'title': 'Software Engineer',
        'description': 'BS Software Engineering student', 'email': 'me@example.com',
        'location': 'Rawalpindi, Pakistan',
        'socialLinks': {'github': 'https://github.com/example'},
    },
    'skills': [
        {'name': 'React.js', 'percentage': 90, 'category': 'frontend'},
        {'name': 'MongoDB', 'percentage': 82, 'category': 'backend'},
        {'name': 'Broken', 'percentage': 250, 'category': 'backend'},
    ],
    'projects': [
        {'title': 'AI-Powered Code Assistant', 'description': 'CodeT5 tooling',
         'technologies': ['Python', 'PyTorch'], 'features': ['Docstring generation'],
         'icon': 'Brain', 'gradient': 'from-pink-500 to-purple-600'},
    ],
    'experience': [
        {'title': 'BS Software Engineering', 'company': 'FAST-NUCES', 'startDate': '2022-09',
         'type': 'education', 'current': True},
    ],
    'certificates': [
        {'title': 'AWS Cloud Practitioner', 'issuer': 'Amazon', 'date': '2024-01'},
    ],
}


def test_import_counts_and_skips_invalid(app_ctx, capsys):
    counts = import_portfolio(DOCUMENT)
    assert counts == {'profile': 1, 'skills': 2, 'projects': 1, 'experience': 1, 'certificates': 1}
    assert '[SKIP] skills[2]' in capsys.readouterr().out

    assert profiles.get_or_create_default()['name'] == 'M. Ahtisham'
    assert [s['name'] for s in skills.list()] == ['MongoDB', 'React.js']
    assert projects.list()[0]['technologies'] == ['Python', 'PyTorch']
    assert experience.list()[0]['current'] is True
    assert certificates.list()[0]['issuer'] == 'Amazon'


def test_import_appends_unless_replace(app_ctx):
    import_portfolio(DOCUMENT)
    import_portfolio(DOCUMENT)
    assert len(skills.list()) == 4

    import_portfolio(DOCUMENT, replace=True)
    assert len(skills.list()) == 2
    assert len(projects.list()) == 1


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / 'missing.json')]) == 1
    assert 'not found' in capsys.readouterr().out


def test_main_imports_into_configured_database(tmp_path, monkeypatch):
    document = tmp_path / 'portfolio.json'
    document.write_text(json.dumps(DOCUMENT), encoding='utf-8')
    monkeypatch.setenv('FLASK_ENV', 'testing')
    monkeypatch.chdir(tmp_path)

    assert main([str(document)]) == 0
