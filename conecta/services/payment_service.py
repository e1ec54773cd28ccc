from decimal import Decimal
from datetime import datetime
from flask import current_app
from conecta.utils.helpers import generate_transaction_id

def commission_amount():
    """Fixed commission charged on the third connection of a pair"""
    return Decimal(str(current_app.config.get('COMMISSION_AMOUNT', '1500.00')))

def process_commission_payment(amount, method, details=None, metadata=None):
    """Charge a connection commission.

    Payments are simulated: no gateway is called and the charge always
    succeeds. A real processor plugs in here and must return the same
    payment info shape.
    """
    transaction_id = generate_transaction_id()
    paid_at = datetime.utcnow()

    current_app.logger.info(
        f"Simulated commission payment {transaction_id} of {amount} "
        f"{current_app.config.get('COMMISSION_CURRENCY', 'ARS')} via {method} ({metadata or {}})"
    )

    return {
        'transaction_id': transaction_id,
        'method': method,
        'details': details or {},
        'amount': float(amount),
        'currency': current_app.config.get('COMMISSION_CURRENCY', 'ARS'),
        'paid_at': paid_at.isoformat(),
        'status': 'completed'
    }
