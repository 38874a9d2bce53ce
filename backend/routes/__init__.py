def init_routes(app):
    """Initialize all routes"""
    from .auth import auth_bp
    from .projects import projects_bp, parts_bp
    from .clients import clients_bp, locations_bp, contacts_bp
    from .time_entries import time_entries_bp
    from .invoices import invoices_bp
    from .employees import employees_bp
    from .tasks import tasks_bp
    from .equipment import equipment_bp
    from .workspace_routes import workspaces_bp
    from .settings_routes import settings_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(projects_bp, url_prefix='/api/projects')
    app.register_blueprint(parts_bp, url_prefix='/api/parts')
    app.register_blueprint(clients_bp, url_prefix='/api/clients')
    app.register_blueprint(locations_bp, url_prefix='/api/client-locations')
    app.register_blueprint(contacts_bp, url_prefix='/api/client-contacts')
    app.register_blueprint(time_entries_bp, url_prefix='/api/time-entries')
    app.register_blueprint(invoices_bp, url_prefix='/api/invoices')
    app.register_blueprint(employees_bp, url_prefix='/api/employees')
    app.register_blueprint(tasks_bp, url_prefix='/api/tasks')
    app.register_blueprint(equipment_bp, url_prefix='/api/equipment')
    app.register_blueprint(workspaces_bp, url_prefix='/api/workspaces')
    app.register_blueprint(settings_bp, url_prefix='/api/settings')
