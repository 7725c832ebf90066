from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),

    # Todo app (namespaced): HTML pages and *.json endpoints
    path("", include(("todo.urls", "todo"), namespace="todo")),
]
