from django.urls import include, path


# Mounted at /api/; each app owns its own route list.
urlpatterns = [
    path( '', include( 'tc.apps.user.api.urls' )),
    path( '', include( 'tc.apps.trips.api.urls' )),
    path( '', include( 'tc.apps.members.api.urls' )),
    path( '', include( 'tc.apps.schedules.api.urls' )),
    path( '', include( 'tc.apps.packing.api.urls' )),
    path( '', include( 'tc.apps.accommodations.api.urls' )),
    path( '', include( 'tc.apps.weather.api.urls' )),
]
