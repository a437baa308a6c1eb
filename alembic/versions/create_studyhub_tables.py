"""Create classes, assignments, degree planning and profile tables

Revision ID: 3a1c9e7f5b20
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a1c9e7f5b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create every table the backend reads and writes."""
    op.create_table(
        'classes',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('course_code', sa.String(), nullable=False),
        sa.Column('course_name', sa.String(), nullable=False),
        sa.Column('professor', sa.String(), nullable=True),
        sa.Column('credit_hours', sa.Float(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('core_category', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_completed', sa.Boolean(), nullable=True),
        sa.Column('is_transfer', sa.Boolean(), nullable=True),
        sa.Column('status', sa.String(), nullable=True),
        sa.Column('final_gpa', sa.Float(), nullable=True),
        sa.Column('grade', sa.Float(), nullable=True),
        sa.Column('color', sa.String(), nullable=True),
        sa.Column('semester', sa.String(), nullable=True),
        sa.Column('days', sa.JSON(), nullable=True),
        sa.Column('start_time', sa.String(), nullable=True),
        sa.Column('end_time', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_classes_id'), 'classes', ['id'], unique=False)
    op.create_index(op.f('ix_classes_user_id'), 'classes', ['user_id'], unique=False)
    op.create_index(op.f('ix_classes_is_active'), 'classes', ['is_active'], unique=False)
    op.create_index(op.f('ix_classes_is_completed'), 'classes', ['is_completed'], unique=False)

    op.create_table(
        'assignments',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('class_id', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('category', sa.String(), nullable=True),
        sa.Column('total_points', sa.Float(), nullable=False),
        sa.Column('earned_points', sa.Float(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('is_graded', sa.Boolean(), nullable=False),
        sa.Column('due_date', sa.String(), nullable=True),
        sa.Column('is_recurring', sa.Boolean(), nullable=False),
        sa.Column('recurrence_end_date', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['class_id'], ['classes.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_assignments_id'), 'assignments', ['id'], unique=False)
    op.create_index(op.f('ix_assignments_user_id'), 'assignments', ['user_id'], unique=False)
    op.create_index(op.f('ix_assignments_class_id'), 'assignments', ['class_id'], unique=False)
    op.create_index(op.f('ix_assignments_is_completed'), 'assignments', ['is_completed'], unique=False)
    op.create_index(op.f('ix_assignments_is_graded'), 'assignments', ['is_graded'], unique=False)

    op.create_table(
        'semesters',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('courses', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_semesters_id'), 'semesters', ['id'], unique=False)
    op.create_index(op.f('ix_semesters_user_id'), 'semesters', ['user_id'], unique=False)

    op.create_table(
        'requirement_courses',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('track', sa.String(), nullable=False),
        sa.Column('course_code', sa.String(), nullable=False),
        sa.Column('course_name', sa.String(), nullable=True),
        sa.Column('credit_hours', sa.Float(), nullable=False),
        sa.Column('category', sa.String(), nullable=True),
        sa.Column('status', sa.String(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=True),
        sa.Column('is_transfer', sa.Boolean(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_requirement_courses_id'), 'requirement_courses', ['id'], unique=False)
    op.create_index(op.f('ix_requirement_courses_user_id'), 'requirement_courses', ['user_id'], unique=False)
    op.create_index(op.f('ix_requirement_courses_track'), 'requirement_courses', ['track'], unique=False)

    op.create_table(
        'user_profiles',
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('degree_credit_requirement', sa.Float(), nullable=True),
        sa.Column('current_gpa', sa.Float(), nullable=True),
        sa.Column('completed_credit_hours', sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint('user_id'),
    )
    op.create_index(op.f('ix_user_profiles_user_id'), 'user_profiles', ['user_id'], unique=False)

    op.create_table(
        'degree_settings',
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('minor_credits_required', sa.Float(), nullable=True),
        sa.Column('core_categories', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('user_id'),
    )
    op.create_index(op.f('ix_degree_settings_user_id'), 'degree_settings', ['user_id'], unique=False)

    op.create_table(
        'category_weights',
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('weights', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('user_id'),
    )
    op.create_index(op.f('ix_category_weights_user_id'), 'category_weights', ['user_id'], unique=False)


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_index(op.f('ix_category_weights_user_id'), table_name='category_weights')
    op.drop_table('category_weights')
    op.drop_index(op.f('ix_degree_settings_user_id'), table_name='degree_settings')
    op.drop_table('degree_settings')
    op.drop_index(op.f('ix_user_profiles_user_id'), table_name='user_profiles')
    op.drop_table('user_profiles')
    op.drop_index(op.f('ix_requirement_courses_track'), table_name='requirement_courses')
    op.drop_index(op.f('ix_requirement_courses_user_id'), table_name='requirement_courses')
    op.drop_index(op.f('ix_requirement_courses_id'), table_name='requirement_courses')
    op.drop_table('requirement_courses')
    op.drop_index(op.f('ix_semesters_user_id'), table_name='semesters')
    op.drop_index(op.f('ix_semesters_id'), table_name='semesters')
    op.drop_table('semesters')
    op.drop_index(op.f('ix_assignments_is_graded'), table_name='assignments')
    op.drop_index(op.f('ix_assignments_is_completed'), table_name='assignments')
    op.drop_index(op.f('ix_assignments_class_id'), table_name='assignments')
    op.drop_index(op.f('ix_assignments_user_id'), table_name='assignments')
    op.drop_index(op.f('ix_assignments_id'), table_name='assignments')
    op.drop_table('assignments')
    op.drop_index(op.f('ix_classes_is_completed'), table_name='classes')
    op.drop_index(op.f('ix_classes_is_active'), table_name='classes')
    op.drop_index(op.f('ix_classes_user_id'), table_name='classes')
    op.drop_index(op.f('ix_classes_id'), table_name='classes')
    op.drop_table('classes')
