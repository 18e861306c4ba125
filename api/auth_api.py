"""
REST endpoints for email one-time-passcode authentication.
"""

import logging

from flask import Blueprint, jsonify
from flask_login import current_user, login_user, logout_user

from api import auth_service
from api.errors import get_json_body

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth_api', __name__, url_prefix='/api')


@auth_bp.route('/send-signup-otp', methods=['POST'])
def send_signup_otp():
    body = get_json_body()
    auth_service.send_signup_otp(body.get('email'))
    return jsonify({'message': 'OTP sent successfully'})


@auth_bp.route('/verify-signup-otp', methods=['POST'])
def verify_signup_otp():
    body = get_json_body()
    auth_service.verify_signup_otp(body.get('email'), body.get('otp'))
    return jsonify({'message': 'Email verified'})


@auth_bp.route('/signup', methods=['POST'])
def signup():
    body = get_json_body()
    user = auth_service.register_user(body.get('name'), body.get('email'), body.get('phone'))
    login_user(user, remember=True)
    return jsonify({'message': 'Signup successful', 'user': user.to_dict()}), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    body = get_json_body()
    auth_service.request_login_otp(body.get('email'))
    return jsonify({'message': 'OTP sent successfully'})


@auth_bp.route('/verify-otp', methods=['POST'])
def verify_otp():
    body = get_json_body()
    user = auth_service.verify_login_otp(body.get('email'), body.get('otp'))
    login_user(user, remember=True)
    return jsonify({'message': 'OTP verified successfully', 'user': user.to_dict()})


@auth_bp.route('/resend-otp', methods=['POST'])
def resend_otp():
    body = get_json_body()
    auth_service.request_login_otp(body.get('email'), purpose='resend')
    return jsonify({'message': 'New OTP has been sent to your email', 'success': True})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    logout_user()
    return jsonify({'message': 'Logged out successfully'})


@auth_bp.route('/auth/me', methods=['GET'])
def me():
    if not current_user.is_authenticated:
        return jsonify({'isAuthenticated': False, 'user': None}), 401
    return jsonify({'isAuthenticated': True, 'user': current_user.to_dict()})
