import json

import pytest


@pytest.fixture
def report_payload():
    """A complete report for a flagged PyPI package, as the API returns it."""
    return {
        'package_name': 'requestz',
        'package_type': 'pypi',
        'package_version': '2.31.1',
        'status': 'complete',
        'summary': {
            'score': 1.2,
            'description': {
                'activity': 2.5,
                'activity_repo': 3.0,
                'activity_user': 1.9,
                'from': 'provenance',
                'malicious': True,
                'provenance': 0.4,
                'trust-summary': 1.2,
                'typosquatting': 8.7,
            },
            'updated_at': '2024-02-01T10:11:12.345678',
        },
        'provenance': {
            'score': 0.4,
            'description': {
                'hp': {
                    'tags': 3,
                    'common': 2,
                    'overlap': 66.7,
                    'versions': 12,
                    'over_time': {},
                },
                'sigstore': {
                    'issuer': 'CN=sigstore-intermediate',
                    'workflow': '.github/workflows/release.yml',
                    'source_repo': 'https://github.com/example/requestz',
                    'token_issuer': 'https://token.actions.githubusercontent.com',
                    'transparency': 'https://search.sigstore.dev/?logIndex=1',
                },
            },
            'updated_at': '2024-02-01T10:11:12.000001',
        },
        'activity': {
            'score': 2.5,
            'description': {'repo': 3.0, 'user': 1.9},
            'updated_at': '2024-02-01T10:11:12.345678',
        },
        'typosquatting': None,
        'alternatives': {
            'status': 'complete',
            'packages': [
                {
                    'id': 'b3c1',
                    'is_malicious': False,
                    'package_name': 'requests',
                    'package_type': 'pypi',
                    'package_version': '2.31.0',
                    'score': 8.9,
                    'repo_description': 'Python HTTP for Humans.',
                    'provenance': None,
                },
            ],
        },
        'package_data': {
            'archived': False,
            'author': 'mallory',
            'contributor_count': 1,
            'contributors': [
                {'login': 'mallory', 'id': '42', 'blog': None, 'public_gists': 3},
            ],
            'home_page': None,
            'id': 'a7f0',
            'is_deprecated': True,
            'last_update': '2024-01-18T03:34:20.000000',
            'malicious': {
                'summary': 'Malicious code in requestz (PyPI)',
                'details': 'Exfiltrates environment variables on install.',
                'published': '2024-01-16T23:40:53Z',
                'modified': '2024-01-18T03:34:20Z',
                'source': 'osv',
            },
            'name': 'requestz',
            'origin': 'ok',
            'owner': {'login': 'mallory', 'company': None},
            'stargazers_count': 0,
            'status_code': None,
            'version_date': 'null',
            'visibility': 'public',
        },
        'same_origin_packages_count': 2,
        'similar_package_names': None,
        'some_future_field': {'ignored': True},
    }


@pytest.fixture
def report_json(report_payload):
    return json.dumps(report_payload)


@pytest.fixture
def report_file(tmp_path, report_json):
    path = tmp_path / 'report.json'
    path.write_text(report_json, encoding='utf-8')
    return path
