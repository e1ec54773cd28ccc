from flask import Blueprint, request
from conecta.services import catalog_service
from conecta.utils.helpers import create_response

zones_bp = Blueprint('zones', __name__)

@zones_bp.route('', methods=['GET'])
def get_zones():
    """List zones of Córdoba, optionally filtered by search term or type"""
    search = request.args.get('search', '').strip()
    zone_type = request.args.get('type', '').strip()

    if search:
        zones = catalog_service.search_zones(search)
    elif zone_type:
        zones = catalog_service.zones_by_type(zone_type)
    else:
        zones = catalog_service.search_zones()

    return create_response({
        'zones': zones,
        'total': len(zones)
    })

@zones_bp.route('/validate/<path:zone>', methods=['GET'])
def validate_zone(zone):
    """Check whether a zone is in the catalog"""
    return create_response({
        'zone': zone,
        'valid': catalog_service.is_valid_zone(zone)
    })

@zones_bp.route('/popular', methods=['GET'])
def get_popular_zones():
    """Zones with the most activity"""
    return create_response({
        'zones': catalog_service.POPULAR_ZONES,
        'total': len(catalog_service.POPULAR_ZONES)
    })

@zones_bp.route('/stats', methods=['GET'])
def get_zone_stats():
    """Zone catalog counters"""
    return create_response(catalog_service.zone_stats())
