"""
Content Routes - One set of CRUD routes per collection repository

GET    /api/<collection>          list, public
POST   /api/<collection>          create, token required
PUT    /api/<collection>/<id>     partial update, token required
DELETE /api/<collection>/<id>     delete, token required
"""

from flask import jsonify
from utils.data import COLLECTIONS
from utils.decorators import login_required, json_body
from . import content_bp


def register_collection(segment, repository):
    """Bind list/create/update/delete views for a repository under /api/<segment>"""

    def list_records():
        return jsonify(repository.list())

    @login_required
    @json_body
    def create_record(data):
        return jsonify(repository.create(data)), 201

    @login_required
    @json_body
    def update_record(record_id, data):
        return jsonify(repository.update(record_id, data))

    @login_required
    def delete_record(record_id):
        return jsonify(repository.delete(record_id))

    content_bp.add_url_rule(f'/{segment}', f'list_{segment}',
                            list_records, methods=['GET'])
    content_bp.add_url_rule(f'/{segment}', f'create_{segment}',
                            create_record, methods=['POST'])
    content_bp.add_url_rule(f'/{segment}/<record_id>', f'update_{segment}',
                            update_record, methods=['PUT'])
    content_bp.add_url_rule(f'/{segment}/<record_id>', f'delete_{segment}',
                            delete_record, methods=['DELETE'])


for _segment, _repository in COLLECTIONS.items():
    register_collection(_segment, _repository)
