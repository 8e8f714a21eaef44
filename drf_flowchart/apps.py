from django.apps import AppConfig


class FlowchartConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "drf_flowchart"
    verbose_name = "Flowchart"
