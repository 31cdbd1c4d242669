"""
Fixed markup embedded in every edit view.

These are opaque text assets; nothing here is derived from the content item.
"""

PUBLISH_TIME = """
<div class="row content-only __cms">
	<div class="input-field col s6">
		<label class="active">MM</label>
		<select class="month __cms browser-default">
			<option value="1">Jan - 01</option>
			<option value="2">Feb - 02</option>
			<option value="3">Mar - 03</option>
			<option value="4">Apr - 04</option>
			<option value="5">May - 05</option>
			<option value="6">Jun - 06</option>
			<option value="7">Jul - 07</option>
			<option value="8">Aug - 08</option>
			<option value="9">Sep - 09</option>
			<option value="10">Oct - 10</option>
			<option value="11">Nov - 11</option>
			<option value="12">Dec - 12</option>
		</select>
	</div>
	<div class="input-field col s2">
		<label class="active">DD</label>
		<input value="" class="day __cms" maxlength="2" type="text" placeholder="DD" />
	</div>
	<div class="input-field col s4">
		<label class="active">YYYY</label>
		<input value="" class="year __cms" maxlength="4" type="text" placeholder="YYYY" />
	</div>
</div>

<div class="row content-only __cms">
	<div class="input-field col s3">
		<label class="active">HH</label>
		<input value="" class="hour __cms" maxlength="2" type="text" placeholder="HH" />
	</div>
	<div class="col s1">:</div>
	<div class="input-field col s3">
		<label class="active">MM</label>
		<input value="" class="minute __cms" maxlength="2" type="text" placeholder="MM" />
	</div>
	<div class="input-field col s4">
		<label class="active">Period</label>
		<select class="period __cms browser-default">
			<option value="AM">AM</option>
			<option value="PM">PM</option>
		</select>
	</div>
</div>
"""

SAVE_CONTROLS = """
<div class="input-field post-controls">
	<button class="right waves-effect waves-light btn green save-post" type="submit">Save</button>
</div>
"""

ADMIN_CONTROLS = """
<div class="input-field post-controls">
	<button class="right waves-effect waves-light btn green save-post" type="submit">Save</button>
	<button class="right waves-effect waves-light btn red delete-post" type="submit">Delete</button>
</div>
"""

APPROVAL_CONTROLS = """
<div class="row external post-controls">
	<div class="col s12 input-field">
		<button class="right waves-effect waves-light btn blue approve-post" type="submit">Approve</button>
		<button class="right waves-effect waves-light btn grey darken-2 reject-post" type="submit">Reject</button>
	</div>
	<label class="approve-details right-align col s12">This content is pending approval. By clicking 'Approve', it will be immediately published. By clicking 'Reject', it will be deleted.</label>
</div>
"""

# Relies on jQuery and a global getParam(name) helper provided by the page.
EDITOR_SCRIPT = """
<script>
	$(function() {
		var form = $('form'),
			save = form.find('button.save-post'),
			del = form.find('button.delete-post'),
			external = form.find('.post-controls.external'),
			id = form.find('input[name=id]'),
			timestamp = $('.__cms.content-only'),
			slug = $('input[name=slug]');

		// new items and non-content editor pages cannot be deleted or approved
		if (id.val() === '-1' || form.attr('action') !== '/admin/edit') {
			del.hide();
			external.hide();
		}

		if (getParam('status') !== 'pending') {
			external.hide();
		}

		// addons have no publish time or slug
		if (form.attr('action') === '/admin/addon') {
			timestamp.hide();
			slug.parent().hide();
		}

		save.on('click', function(e) {
			e.preventDefault();

			if (getParam('status') === 'pending') {
				var action = form.attr('action');
				form.attr('action', action + '?status=pending')
			}

			form.submit();
		});

		del.on('click', function(e) {
			e.preventDefault();
			var action = form.attr('action');
			action = action + '/delete';
			form.attr('action', action);

			if (confirm("Please confirm:\\n\\nAre you sure you want to delete this post?\\nThis cannot be undone.")) {
				form.submit();
			}
		});

		external.find('button.approve-post').on('click', function(e) {
			e.preventDefault();
			var action = form.attr('action');
			action = action + '/approve';
			form.attr('action', action);

			form.submit();
		});

		external.find('button.reject-post').on('click', function(e) {
			e.preventDefault();
			var action = form.attr('action');
			action = action + '/delete?reject=true';
			form.attr('action', action);

			if (confirm("Please confirm:\\n\\nAre you sure you want to reject this post?\\nDoing so will delete it, and cannot be undone.")) {
				form.submit();
			}
		});
	});
</script>
"""
