from flask import current_app
from isp_manager.models.package import Package, DEFAULT_ACTIVE_DURATION_DAYS
from isp_manager.models.subscription import Subscription
from isp_manager.extension.extensions import db, atomic, reading
from isp_manager.errors import NotFoundError, ConflictError
from isp_manager.services.validators import require_payload, require_text, parse_price, is_storable_id

def get_package(pkg_id):
    pkg = None
    if is_storable_id(pkg_id):
        with reading("load package"):
            pkg = db.session.get(Package, pkg_id)
    if pkg is None:
        raise NotFoundError(f"Package with id {pkg_id} not found", details={"id": pkg_id})
    return pkg

def list_packages():
    with reading("list packages"):
        return Package.query.order_by(Package.id.asc()).all()

def create_package(data):
    data = require_payload(data)
    pkg = Package(
        name=require_text(data, 'name'),
        speed=require_text(data, 'speed'),
        price=parse_price(data.get('price')),
        # every package sold through the API runs for the same period
        active_duration=DEFAULT_ACTIVE_DURATION_DAYS
    )
    with atomic("create package"):
        db.session.add(pkg)
    current_app.logger.info(f"Created package {pkg.id} ({pkg.name}, {pkg.price})")
    return pkg

def update_package(pkg_id, data):
    data = require_payload(data)
    pkg = get_package(pkg_id)
    changes = {}
    if 'name' in data: changes['name'] = require_text(data, 'name')
    if 'speed' in data: changes['speed'] = require_text(data, 'speed')
    if 'price' in data: changes['price'] = parse_price(data['price'])
    with atomic("update package"):
        for k, v in changes.items():
            setattr(pkg, k, v)
    current_app.logger.info(f"Updated package {pkg.id}: {sorted(changes)}")
    return pkg

def delete_package(pkg_id):
    pkg = get_package(pkg_id)
    # any subscription blocks, expired ones included
    with reading("check package references"):
        referenced = Subscription.query.filter_by(package_id=pkg.id).first()
    if referenced is not None:
        current_app.logger.warning(f"Refusing to delete package {pkg.id}: referenced by subscription {referenced.id}")
        raise ConflictError(
            "Cannot delete package that is referenced by existing subscriptions",
            details={"id": pkg.id}
        )
    with atomic("delete package"):
        db.session.delete(pkg)
    current_app.logger.info(f"Deleted package {pkg_id}")
    return True
