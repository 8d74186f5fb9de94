from django.db import connection
from django.http import HttpResponse

def health(request):
    """
    Health check endpoint for Load Balancer
    """
    connection.ensure_connection()
    return HttpResponse("OK", content_type="text/plain")
