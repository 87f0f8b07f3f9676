# Gate-Pass Service: Database Models
# Import all models here for SQLAlchemy discovery

from gatepass.models.snapshot import StoredSnapshot   # noqa
