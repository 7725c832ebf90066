from django.urls import path
from django.views.generic import RedirectView

from . import api, views

app_name = "todo"

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="todo:tasks", permanent=False), name="home"),

    # HTML pages
    path("tasks", views.tasks, name="tasks"),
    path("newTask", views.new_task, name="new_task"),
    path("updateTask", views.update_task, name="update_task"),

    # JSON endpoints
    path("tasks.json", api.tasks_json, name="tasks_json"),
    path("addresses.json", api.addresses_json, name="addresses_json"),
    path("appointments.json", api.appointments_json, name="appointments_json"),
]
