from flask import Blueprint, request
from conecta.services import catalog_service
from conecta.utils.helpers import create_response, create_error_response

trades_bp = Blueprint('trades', __name__)

@trades_bp.route('', methods=['GET'])
def get_trades():
    """List trades, optionally filtered by search term or category"""
    search = request.args.get('search', '').strip()
    category = request.args.get('category', '').strip()

    if search:
        trades = catalog_service.search_trades(search)
    elif category:
        trades = catalog_service.trades_by_category(category)
    else:
        trades = catalog_service.search_trades()

    return create_response({
        'trades': trades,
        'total': len(trades)
    })

@trades_bp.route('/categories', methods=['GET'])
def get_categories():
    """List trade categories with their trades"""
    categories = [
        {
            'name': category,
            'trades': catalog_service.trades_by_category(category),
            'total': len(catalog_service.trades_by_category(category))
        }
        for category in catalog_service.trade_categories()
    ]

    return create_response({
        'categories': categories,
        'total_categories': len(categories),
        'total_trades': len(catalog_service.ALL_TRADES)
    })

@trades_bp.route('/popular', methods=['GET'])
def get_popular_trades():
    """Most requested trades"""
    return create_response({
        'trades': catalog_service.POPULAR_TRADES,
        'total': len(catalog_service.POPULAR_TRADES)
    })

@trades_bp.route('/<path:trade>', methods=['GET'])
def get_trade(trade):
    """Category and related trades of a single trade"""
    if not catalog_service.is_valid_trade(trade):
        return create_error_response('Trade not found', 404)

    return create_response({
        'trade': trade,
        'category': catalog_service.category_of_trade(trade),
        'related': catalog_service.related_trades(trade)
    })
